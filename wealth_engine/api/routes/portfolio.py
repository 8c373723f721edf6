"""Holdings and trade analytics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wealth_engine.api.dependencies import get_analytics_settings
from wealth_engine.config import AnalyticsSettings
from wealth_engine.schemas import (
    HarvestOpportunitySchema,
    HoldingsRequest,
    RebalancingResponse,
    StreaksRequest,
    StreaksResponse,
    TaxHarvestResponse,
)
from wealth_engine.services.rebalancing import suggest_rebalancing
from wealth_engine.services.streaks import compute_streaks
from wealth_engine.services.tax_harvest import find_opportunities, total_tax_saving

router = APIRouter()


@router.post("/tax-harvest", response_model=TaxHarvestResponse)
async def tax_harvest(
    request: HoldingsRequest,
    settings: AnalyticsSettings = Depends(get_analytics_settings),
) -> TaxHarvestResponse:
    """List holdings whose unrealized losses could be harvested."""

    opportunities = find_opportunities(
        [holding.to_record() for holding in request.holdings],
        config=settings.harvest_config(),
    )
    return TaxHarvestResponse(
        opportunities=[HarvestOpportunitySchema.model_validate(opp) for opp in opportunities],
        total_potential_saving=total_tax_saving(opportunities),
    )


@router.post("/rebalancing", response_model=RebalancingResponse)
async def rebalancing(
    request: HoldingsRequest,
    settings: AnalyticsSettings = Depends(get_analytics_settings),
) -> RebalancingResponse:
    plan = suggest_rebalancing(
        [holding.to_record() for holding in request.holdings],
        config=settings.rebalancing_config(),
    )
    return RebalancingResponse.model_validate(plan)


@router.post("/streaks", response_model=StreaksResponse)
async def streaks(request: StreaksRequest) -> StreaksResponse:
    summary = compute_streaks([trade.to_record() for trade in request.trades])
    return StreaksResponse.model_validate(summary)


__all__ = ["rebalancing", "streaks", "tax_harvest"]
