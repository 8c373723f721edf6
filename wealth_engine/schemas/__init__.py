"""Pydantic schema exports."""

from .records import HoldingSchema, TradeOutcomeSchema, TransactionSchema
from .projection import ProjectionPercentiles, ProjectionRequest, ProjectionResponse
from .portfolio import (
    HarvestOpportunitySchema,
    HoldingsRequest,
    RebalanceSuggestionSchema,
    RebalancingResponse,
    StreaksRequest,
    StreaksResponse,
    TaxHarvestResponse,
)
from .spending import (
    AnomalySchema,
    CategoryTrendSchema,
    RecurringPatternSchema,
    RunwayRequest,
    RunwayResponse,
    TransactionsRequest,
)
from .planning import FireRequest, FireResponse, GoalRequest, GoalResponse

__all__ = [
    "HoldingSchema",
    "TradeOutcomeSchema",
    "TransactionSchema",
    "ProjectionPercentiles",
    "ProjectionRequest",
    "ProjectionResponse",
    "HarvestOpportunitySchema",
    "HoldingsRequest",
    "RebalanceSuggestionSchema",
    "RebalancingResponse",
    "StreaksRequest",
    "StreaksResponse",
    "TaxHarvestResponse",
    "AnomalySchema",
    "CategoryTrendSchema",
    "RecurringPatternSchema",
    "RunwayRequest",
    "RunwayResponse",
    "TransactionsRequest",
    "FireRequest",
    "FireResponse",
    "GoalRequest",
    "GoalResponse",
]
