"""Burn rate and emergency runway.

The burn rate averages all debit, non-excluded spend over the months between
the earliest expense and the reference date (never fewer than one month).
Runway is the number of those months liquid holdings would cover.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, Sequence

from .records import Holding, Transaction, as_number

DEFAULT_LIQUID_TYPES = ("Stocks", "Mutual Fund", "Cash", "Gold")
DAYS_PER_MONTH = 30


class RunwayState(str, Enum):
    PANIC = "PANIC"
    WARNING = "WARNING"
    SAFE = "SAFE"
    FREEDOM = "FREEDOM"


@dataclass(frozen=True)
class RunwayThresholds:
    """Lower bounds (exclusive, in months) for each state above PANIC."""

    warning: float = 6
    safe: float = 12
    freedom: float = 60


@dataclass(frozen=True)
class RunwayReport:
    monthly_burn: float
    liquid_assets: float
    runway_months: float
    is_infinite: bool
    state: RunwayState


def monthly_burn(transactions: Iterable[Transaction], reference_date: date | None = None) -> float:
    reference_date = reference_date or date.today()
    expenses = [txn for txn in transactions if txn.is_debit and not txn.excluded]
    if not expenses:
        return 0.0
    earliest = min(txn.date for txn in expenses)
    months = max(1.0, (reference_date - earliest).days / DAYS_PER_MONTH)
    return sum(as_number(txn.amount) for txn in expenses) / months


def liquid_assets(holdings: Iterable[Holding], liquid_types: Sequence[str] = DEFAULT_LIQUID_TYPES) -> float:
    allowed = set(liquid_types)
    return sum(max(0.0, as_number(h.current_value)) for h in holdings if h.asset_type in allowed)


def classify_runway(
    runway_months: float,
    is_infinite: bool,
    thresholds: RunwayThresholds | None = None,
) -> RunwayState:
    thresholds = thresholds or RunwayThresholds()
    if is_infinite or runway_months > thresholds.freedom:
        return RunwayState.FREEDOM
    if runway_months > thresholds.safe:
        return RunwayState.SAFE
    if runway_months > thresholds.warning:
        return RunwayState.WARNING
    return RunwayState.PANIC


def compute_runway(
    transactions: Iterable[Transaction],
    holdings: Iterable[Holding],
    reference_date: date | None = None,
    *,
    liquid_types: Sequence[str] = DEFAULT_LIQUID_TYPES,
    thresholds: RunwayThresholds | None = None,
) -> RunwayReport:
    burn = monthly_burn(transactions, reference_date)
    liquid = liquid_assets(holdings, liquid_types)
    runway_months = liquid / burn if burn > 0 else 0.0
    is_infinite = burn == 0 and liquid > 0
    return RunwayReport(
        monthly_burn=burn,
        liquid_assets=liquid,
        runway_months=runway_months,
        is_infinite=is_infinite,
        state=classify_runway(runway_months, is_infinite, thresholds),
    )


__all__ = [
    "DEFAULT_LIQUID_TYPES",
    "RunwayReport",
    "RunwayState",
    "RunwayThresholds",
    "classify_runway",
    "compute_runway",
    "liquid_assets",
    "monthly_burn",
]
