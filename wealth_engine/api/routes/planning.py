"""FIRE and net-worth goal endpoints."""

from __future__ import annotations

import math

from fastapi import APIRouter

from wealth_engine.schemas import FireRequest, FireResponse, GoalRequest, GoalResponse
from wealth_engine.services.planning import compute_fire_metrics, compute_goal_progress

router = APIRouter()


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


@router.post("/fire", response_model=FireResponse)
async def fire(request: FireRequest) -> FireResponse:
    metrics = compute_fire_metrics(
        request.current_wealth,
        request.annual_expenses,
        request.monthly_contribution,
        request.current_age,
        request.target_age,
        expected_return=request.expected_return,
        withdrawal_rate=request.withdrawal_rate,
    )
    return FireResponse(
        fire_number=metrics.fire_number,
        progress=metrics.progress,
        years_to_fire=_finite_or_none(metrics.years_to_fire),
        fire_age=_finite_or_none(metrics.fire_age),
        on_track=metrics.on_track,
    )


@router.post("/goal", response_model=GoalResponse)
async def goal(request: GoalRequest) -> GoalResponse:
    progress = compute_goal_progress(
        request.current_net_worth,
        request.target_net_worth,
        request.target_date,
        request.reference_date,
    )
    return GoalResponse(
        progress=progress.progress,
        days_remaining=progress.days_remaining,
        months_remaining=progress.months_remaining,
        gap=progress.gap,
        monthly_savings_needed=progress.monthly_savings_needed,
        milestone=progress.milestone,
    )


__all__ = ["fire", "goal"]
