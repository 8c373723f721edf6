"""Schemas for transaction-driven spending analytics."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from wealth_engine.services.anomalies import Severity
from wealth_engine.services.patterns import Frequency
from wealth_engine.services.runway import RunwayState
from wealth_engine.services.trends import TrendDirection

from .records import HoldingSchema, TransactionSchema


class TransactionsRequest(BaseModel):
    transactions: list[TransactionSchema]
    reference_date: Optional[date] = None


class RecurringPatternSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    merchant: str
    amount: float
    frequency: Frequency
    last_date: date
    next_expected: date
    count: int
    average_interval_days: float


class AnomalySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    transaction: TransactionSchema
    deviation: float
    severity: Severity
    reason: str


class CategoryTrendSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    current_amount: float
    previous_amount: float
    change: float
    change_percent: float
    trend: TrendDirection


class RunwayRequest(BaseModel):
    transactions: list[TransactionSchema]
    holdings: list[HoldingSchema]
    reference_date: Optional[date] = None


class RunwayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    monthly_burn: float
    liquid_assets: float
    runway_months: float
    is_infinite: bool
    state: RunwayState


__all__ = [
    "AnomalySchema",
    "CategoryTrendSchema",
    "RecurringPatternSchema",
    "RunwayRequest",
    "RunwayResponse",
    "TransactionsRequest",
]
