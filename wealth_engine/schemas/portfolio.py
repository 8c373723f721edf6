"""Schemas for holdings and trade analytics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from wealth_engine.services.rebalancing import RebalanceAction

from .records import HoldingSchema, TradeOutcomeSchema


class HoldingsRequest(BaseModel):
    holdings: list[HoldingSchema]


class HarvestOpportunitySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    holding: HoldingSchema
    unrealized_loss: float
    loss_percent: float
    potential_tax_saving: float


class TaxHarvestResponse(BaseModel):
    opportunities: list[HarvestOpportunitySchema]
    total_potential_saving: float


class RebalanceSuggestionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    asset_class: str
    action: RebalanceAction
    amount: float
    reason: str


class RebalancingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: float
    current_allocation: dict[str, float]
    suggestions: list[RebalanceSuggestionSchema]
    score: float


class StreaksRequest(BaseModel):
    trades: list[TradeOutcomeSchema]


class StreaksResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current_win_streak: int
    current_lose_streak: int


__all__ = [
    "HarvestOpportunitySchema",
    "HoldingsRequest",
    "RebalanceSuggestionSchema",
    "RebalancingResponse",
    "StreaksRequest",
    "StreaksResponse",
    "TaxHarvestResponse",
]
