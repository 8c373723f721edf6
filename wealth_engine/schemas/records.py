"""Pydantic schemas for the records the dashboard hands over."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field

from wealth_engine.services.records import Holding, TradeOutcome, Transaction, TransactionType


class HoldingSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., examples=["inv-1"])
    name: str = Field(..., examples=["Nifty 50 Index Fund"])
    invested_amount: float = Field(default=0.0, ge=0.0)
    current_value: float = Field(default=0.0, ge=0.0)
    asset_type: str = Field(default="Stocks", examples=["Mutual Fund"])
    asset_class: str = Field(default="Equity", examples=["Debt"])
    is_long_term: bool = False

    def to_record(self) -> Holding:
        return Holding(
            id=self.id,
            name=self.name,
            invested_amount=self.invested_amount,
            current_value=self.current_value,
            asset_type=self.asset_type,
            asset_class=self.asset_class,
            is_long_term=self.is_long_term,
        )


class TransactionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., examples=["txn-1"])
    date: datetime.date
    amount: float = Field(default=0.0, examples=[499])
    category: str = Field(..., examples=["Subscriptions"])
    merchant: str | None = Field(default=None, examples=["Netflix"])
    description: str = ""
    type: TransactionType = TransactionType.DEBIT
    excluded: bool = False

    def to_record(self) -> Transaction:
        return Transaction(
            id=self.id,
            date=self.date,
            amount=self.amount,
            category=self.category,
            merchant=self.merchant,
            description=self.description,
            type=self.type,
            excluded=self.excluded,
        )


class TradeOutcomeSchema(BaseModel):
    date: datetime.date
    pnl: float = 0.0

    def to_record(self) -> TradeOutcome:
        return TradeOutcome(date=self.date, pnl=self.pnl)


__all__ = ["HoldingSchema", "TradeOutcomeSchema", "TransactionSchema"]
