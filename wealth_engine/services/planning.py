"""Deterministic planning helpers: FIRE metrics and net-worth goal progress."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

from .records import as_number

DEFAULT_EXPECTED_RETURN = 0.12
DEFAULT_WITHDRAWAL_RATE = 0.04

GOAL_MILESTONES = (
    (100.0, "Goal Achieved"),
    (75.0, "Almost There"),
    (50.0, "Halfway Point"),
    (25.0, "Building Momentum"),
)
GOAL_STARTING_LABEL = "Just Getting Started"


@dataclass(frozen=True)
class FireMetrics:
    fire_number: float
    progress: float
    years_to_fire: float
    fire_age: float
    on_track: bool


@dataclass(frozen=True)
class GoalProgress:
    progress: float
    days_remaining: int
    months_remaining: int
    gap: float
    monthly_savings_needed: float
    milestone: str


def _months_to_target(current: float, target: float, monthly_rate: float, contribution: float) -> float:
    if current >= target:
        return 0.0
    if monthly_rate == 0:
        return (target - current) / contribution if contribution > 0 else math.inf
    numerator = target * monthly_rate + contribution
    denominator = current * monthly_rate + contribution
    if monthly_rate <= -1 or denominator <= 0 or numerator / denominator <= 0:
        return math.inf
    months = math.log(numerator / denominator) / math.log(1 + monthly_rate)
    return months if months >= 0 else math.inf


def compute_fire_metrics(
    current_wealth: float,
    annual_expenses: float,
    monthly_contribution: float,
    current_age: float,
    target_age: float,
    expected_return: float = DEFAULT_EXPECTED_RETURN,
    withdrawal_rate: float = DEFAULT_WITHDRAWAL_RATE,
) -> FireMetrics:
    """Size the FIRE corpus and estimate when compounding gets there.

    Rates are decimals (0.12 for 12%). Unreachable targets report infinite
    years and are never on track.
    """

    wealth = max(0.0, as_number(current_wealth))
    expenses = max(0.0, as_number(annual_expenses))
    contribution = max(0.0, as_number(monthly_contribution))
    withdrawal_rate = as_number(withdrawal_rate)

    fire_number = expenses / withdrawal_rate if withdrawal_rate > 0 else 0.0
    progress = min(100.0, wealth / fire_number * 100.0) if fire_number > 0 else 100.0

    months = _months_to_target(wealth, fire_number, as_number(expected_return) / 12, contribution)
    years_to_fire = max(0.0, months / 12)
    fire_age = as_number(current_age) + years_to_fire
    return FireMetrics(
        fire_number=fire_number,
        progress=progress,
        years_to_fire=years_to_fire,
        fire_age=fire_age,
        on_track=fire_age <= as_number(target_age),
    )


def goal_milestone(progress: float) -> str:
    for floor, label in GOAL_MILESTONES:
        if progress >= floor:
            return label
    return GOAL_STARTING_LABEL


def compute_goal_progress(
    current_net_worth: float,
    target_net_worth: float,
    target_date: date | None,
    reference_date: date | None = None,
) -> GoalProgress:
    reference_date = reference_date or date.today()
    current = as_number(current_net_worth)
    target = as_number(target_net_worth)

    progress = min(current / target * 100.0, 100.0) if target > 0 else 0.0
    progress = max(0.0, progress)
    days_remaining = max(0, (target_date - reference_date).days) if target_date else 0
    months_remaining = math.ceil(days_remaining / 30)
    gap = target - current
    monthly_savings_needed = gap / months_remaining if months_remaining > 0 else 0.0
    return GoalProgress(
        progress=progress,
        days_remaining=days_remaining,
        months_remaining=months_remaining,
        gap=gap,
        monthly_savings_needed=monthly_savings_needed,
        milestone=goal_milestone(progress),
    )


__all__ = [
    "FireMetrics",
    "GoalProgress",
    "compute_fire_metrics",
    "compute_goal_progress",
    "goal_milestone",
]
