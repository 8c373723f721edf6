"""Transaction-driven spending analytics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wealth_engine.api.dependencies import get_analytics_settings
from wealth_engine.config import AnalyticsSettings
from wealth_engine.schemas import (
    AnomalySchema,
    CategoryTrendSchema,
    RecurringPatternSchema,
    RunwayRequest,
    RunwayResponse,
    TransactionsRequest,
)
from wealth_engine.services.anomalies import detect_anomalies
from wealth_engine.services.patterns import detect_recurring
from wealth_engine.services.runway import compute_runway
from wealth_engine.services.trends import month_over_month

router = APIRouter()


@router.post("/recurring", response_model=list[RecurringPatternSchema])
async def recurring(
    request: TransactionsRequest,
    settings: AnalyticsSettings = Depends(get_analytics_settings),
) -> list[RecurringPatternSchema]:
    """Detect subscriptions and other fixed-amount recurring payments."""

    patterns = detect_recurring(
        [txn.to_record() for txn in request.transactions],
        config=settings.pattern_config(),
    )
    return [RecurringPatternSchema.model_validate(pattern) for pattern in patterns]


@router.post("/anomalies", response_model=list[AnomalySchema])
async def anomalies(
    request: TransactionsRequest,
    settings: AnalyticsSettings = Depends(get_analytics_settings),
) -> list[AnomalySchema]:
    records = detect_anomalies(
        [txn.to_record() for txn in request.transactions],
        config=settings.anomaly_config(),
    )
    return [AnomalySchema.model_validate(record) for record in records]


@router.post("/trends", response_model=list[CategoryTrendSchema])
async def trends(
    request: TransactionsRequest,
    settings: AnalyticsSettings = Depends(get_analytics_settings),
) -> list[CategoryTrendSchema]:
    """Compare this month's category spend with last month's."""

    category_trends = month_over_month(
        [txn.to_record() for txn in request.transactions],
        request.reference_date,
        config=settings.trend_config(),
    )
    return [CategoryTrendSchema.model_validate(trend) for trend in category_trends]


@router.post("/runway", response_model=RunwayResponse)
async def runway(
    request: RunwayRequest,
    settings: AnalyticsSettings = Depends(get_analytics_settings),
) -> RunwayResponse:
    report = compute_runway(
        [txn.to_record() for txn in request.transactions],
        [holding.to_record() for holding in request.holdings],
        request.reference_date,
        liquid_types=settings.runway_liquid_types,
    )
    return RunwayResponse.model_validate(report)


__all__ = ["anomalies", "recurring", "runway", "trends"]
