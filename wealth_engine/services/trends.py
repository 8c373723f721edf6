"""Month-over-month category spend comparison."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable

import pandas as pd

from .records import Transaction, as_number

DEFAULT_STABLE_BAND_PERCENT = 5.0


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class TrendConfig:
    stable_band_percent: float = DEFAULT_STABLE_BAND_PERCENT

    def __post_init__(self):
        if self.stable_band_percent < 0:
            raise ValueError("stable_band_percent must be >= 0")


@dataclass(frozen=True)
class CategoryTrend:
    category: str
    current_amount: float
    previous_amount: float
    change: float
    change_percent: float
    trend: TrendDirection


def previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def _month_index(year: int, month: int) -> int:
    return year * 12 + (month - 1)


def _change_percent(current: float, previous: float) -> float:
    if previous > 0:
        return (current - previous) / previous * 100.0
    return 100.0 if current > 0 else 0.0


def month_over_month(
    transactions: Iterable[Transaction],
    reference_date: date | None = None,
    *,
    config: TrendConfig | None = None,
) -> list[CategoryTrend]:
    """Compare debit spend per category between this month and the last."""

    config = config or TrendConfig()
    reference_date = reference_date or date.today()
    current_period = _month_index(reference_date.year, reference_date.month)
    previous_period = _month_index(*previous_month(reference_date.year, reference_date.month))

    rows = [
        {
            "category": txn.category,
            "amount": as_number(txn.amount),
            "period": _month_index(txn.date.year, txn.date.month),
        }
        for txn in transactions
        if txn.is_debit and not txn.excluded
    ]
    if not rows:
        return []
    df = pd.DataFrame(rows)
    df = df[df["period"].isin([current_period, previous_period])]
    if df.empty:
        return []

    totals = df.groupby(["category", "period"], sort=False)["amount"].sum()
    categories = list(dict.fromkeys(df["category"].tolist()))

    trends: list[CategoryTrend] = []
    for category in categories:
        current = float(totals.get((category, current_period), 0.0))
        previous = float(totals.get((category, previous_period), 0.0))
        change = current - previous
        change_percent = _change_percent(current, previous)
        if abs(change_percent) < config.stable_band_percent:
            direction = TrendDirection.STABLE
        elif change > 0:
            direction = TrendDirection.UP
        else:
            direction = TrendDirection.DOWN
        trends.append(
            CategoryTrend(
                category=category,
                current_amount=current,
                previous_amount=previous,
                change=change,
                change_percent=change_percent,
                trend=direction,
            )
        )

    trends.sort(key=lambda trend: -abs(trend.change_percent))
    return trends


__all__ = [
    "CategoryTrend",
    "TrendConfig",
    "TrendDirection",
    "month_over_month",
    "previous_month",
]
