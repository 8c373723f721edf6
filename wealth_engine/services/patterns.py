"""Recurring payment detection.

Transactions are grouped by counterparty. A group counts as recurring when its
amounts barely move (variance / mean below a threshold); the cadence is then
read off the average gap between distinct payment dates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Iterable

from .records import Transaction, as_number

DEFAULT_DISPERSION_THRESHOLD = 0.1
DEFAULT_MAX_PATTERNS = 10
DESCRIPTION_KEY_LENGTH = 20


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class FrequencyBuckets:
    """Upper bounds (exclusive, in days) of the average gap for each bucket."""

    daily: float = 2
    weekly: float = 10
    biweekly: float = 20
    monthly: float = 45

    def classify(self, average_gap: float) -> Frequency:
        if average_gap < self.daily:
            return Frequency.DAILY
        if average_gap < self.weekly:
            return Frequency.WEEKLY
        if average_gap < self.biweekly:
            return Frequency.BIWEEKLY
        if average_gap < self.monthly:
            return Frequency.MONTHLY
        return Frequency.YEARLY


@dataclass(frozen=True)
class PatternConfig:
    dispersion_threshold: float = DEFAULT_DISPERSION_THRESHOLD
    min_occurrences: int = 2
    max_results: int = DEFAULT_MAX_PATTERNS
    buckets: FrequencyBuckets = field(default_factory=FrequencyBuckets)

    def __post_init__(self):
        if self.dispersion_threshold <= 0:
            raise ValueError("dispersion_threshold must be positive")
        if self.min_occurrences < 2:
            raise ValueError("min_occurrences must be at least 2")
        if self.max_results < 0:
            raise ValueError("max_results must be >= 0")


@dataclass(frozen=True)
class RecurringPattern:
    merchant: str
    amount: float
    frequency: Frequency
    last_date: date
    next_expected: date
    count: int
    average_interval_days: float


def counterparty_key(txn: Transaction) -> str:
    merchant = (txn.merchant or "").strip()
    if merchant:
        return merchant
    return (txn.description or "")[:DESCRIPTION_KEY_LENGTH]


def _dispersion(amounts: list[float]) -> float:
    mean = sum(amounts) / len(amounts)
    variance = sum((amount - mean) ** 2 for amount in amounts) / len(amounts)
    if mean == 0:
        return 0.0 if variance == 0 else float("inf")
    return variance / abs(mean)


def _average_gap(dates: list[date]) -> float:
    distinct = sorted(set(dates))
    if len(distinct) < 2:
        return 0.0
    gaps = [(later - earlier).days for earlier, later in zip(distinct, distinct[1:])]
    return sum(gaps) / len(gaps)


def detect_recurring(
    transactions: Iterable[Transaction],
    *,
    config: PatternConfig | None = None,
) -> list[RecurringPattern]:
    """Return the most frequently observed recurring counterparties."""

    config = config or PatternConfig()
    groups: dict[str, list[Transaction]] = {}
    for txn in transactions:
        groups.setdefault(counterparty_key(txn), []).append(txn)

    patterns: list[RecurringPattern] = []
    for merchant, txns in groups.items():
        if len(txns) < config.min_occurrences:
            continue
        amounts = [as_number(txn.amount) for txn in txns]
        if _dispersion(amounts) >= config.dispersion_threshold:
            continue
        dates = [txn.date for txn in txns]
        average_gap = _average_gap(dates)
        last_date = max(dates)
        patterns.append(
            RecurringPattern(
                merchant=merchant,
                amount=sum(amounts) / len(amounts),
                frequency=config.buckets.classify(average_gap),
                last_date=last_date,
                next_expected=last_date + timedelta(days=math.floor(average_gap + 0.5)),
                count=len(txns),
                average_interval_days=average_gap,
            )
        )

    patterns.sort(key=lambda pattern: -pattern.count)
    return patterns[: config.max_results]


__all__ = [
    "DEFAULT_DISPERSION_THRESHOLD",
    "Frequency",
    "FrequencyBuckets",
    "PatternConfig",
    "RecurringPattern",
    "counterparty_key",
    "detect_recurring",
]
