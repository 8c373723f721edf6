"""Monte Carlo wealth projection endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from wealth_engine.api.cache import TTLCache
from wealth_engine.api.dependencies import get_analytics_settings
from wealth_engine.config import AnalyticsSettings
from wealth_engine.schemas import ProjectionPercentiles, ProjectionRequest, ProjectionResponse
from wealth_engine.services.projection import simulate

logger = logging.getLogger(__name__)

router = APIRouter()
_projection_cache: TTLCache[ProjectionResponse] | None = None


def get_projection_cache(settings: AnalyticsSettings = Depends(get_analytics_settings)) -> TTLCache[ProjectionResponse]:
    global _projection_cache
    if _projection_cache is None or _projection_cache.ttl_seconds != settings.projection_cache_ttl_seconds:
        _projection_cache = TTLCache(settings.projection_cache_ttl_seconds)
    return _projection_cache


@router.post("/projection", response_model=ProjectionResponse)
async def run_projection(
    request: ProjectionRequest,
    settings: AnalyticsSettings = Depends(get_analytics_settings),
    cache: TTLCache[ProjectionResponse] = Depends(get_projection_cache),
) -> ProjectionResponse:
    """Simulate long-horizon wealth and the chance of reaching the target."""

    cache_key = request.model_dump_json()
    cached = cache.get(cache_key)
    if cached is not None:
        logger.debug("Serving cached projection")
        return cached

    result = simulate(
        request.principal,
        request.monthly_contribution,
        request.years,
        request.target_wealth,
        settings.default_mean_return if request.mean_return is None else request.mean_return,
        settings.default_volatility if request.volatility is None else request.volatility,
        config=settings.simulation_config(trials=request.trials, seed=request.seed),
        include_outcomes=request.include_outcomes,
    )
    response = ProjectionResponse(
        percentiles=ProjectionPercentiles(
            p10=result.percentiles.p10,
            p50=result.percentiles.p50,
            p90=result.percentiles.p90,
        ),
        success_probability=result.success_probability,
        trials=result.trials,
        months=result.months,
        outcomes=result.outcomes if request.include_outcomes else None,
    )
    cache.set(cache_key, response)
    logger.info(
        "Projection over %s months: %.1f%% success across %s trials",
        result.months,
        result.success_probability,
        result.trials,
    )
    return response


__all__ = ["get_projection_cache", "run_projection"]
