"""Spending anomaly detection based on per-category dispersion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import numpy as np

from .records import Transaction, as_number

DEFAULT_THRESHOLD = 2.0
DEFAULT_HIGH_THRESHOLD = 3.0
DEFAULT_MAX_ANOMALIES = 5


class Severity(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"


class Baseline(str, Enum):
    """What a transaction is compared against.

    ``LEAVE_ONE_OUT`` scores each amount against the rest of its category, so a
    single large outlier cannot inflate its own standard deviation. Where the
    rest of the category has no spread (a spike among identical amounts) or
    the category is too small, it falls back to the population z-score.
    ``POPULATION`` is the plain z-score over the whole category; with n members
    it can never exceed ``sqrt(n - 1)``.
    """

    LEAVE_ONE_OUT = "leave_one_out"
    POPULATION = "population"


@dataclass(frozen=True)
class AnomalyConfig:
    threshold: float = DEFAULT_THRESHOLD
    high_threshold: float = DEFAULT_HIGH_THRESHOLD
    max_results: int = DEFAULT_MAX_ANOMALIES
    baseline: Baseline = Baseline.LEAVE_ONE_OUT

    def __post_init__(self):
        if self.threshold <= 0:
            raise ValueError("threshold must be positive")
        if self.high_threshold < self.threshold:
            raise ValueError("high_threshold must be >= threshold")
        if self.max_results < 0:
            raise ValueError("max_results must be >= 0")


@dataclass(frozen=True)
class AnomalyRecord:
    transaction: Transaction
    deviation: float
    severity: Severity
    reason: str


def _deviations(amounts: np.ndarray, baseline: Baseline) -> np.ndarray:
    """Signed deviation of every amount in standard-deviation units."""

    deviations = (amounts - amounts.mean()) / amounts.std()
    if baseline == Baseline.POPULATION or len(amounts) < 3:
        return deviations

    for index in range(len(amounts)):
        others = np.delete(amounts, index)
        spread = others.std()
        if spread > 0:
            deviations[index] = (amounts[index] - others.mean()) / spread
    return deviations


def detect_anomalies(
    transactions: Iterable[Transaction],
    *,
    config: AnomalyConfig | None = None,
) -> list[AnomalyRecord]:
    """Flag transactions far from their category's typical amount."""

    config = config or AnomalyConfig()
    by_category: dict[str, list[Transaction]] = {}
    for txn in transactions:
        by_category.setdefault(txn.category, []).append(txn)

    anomalies: list[AnomalyRecord] = []
    for txns in by_category.values():
        amounts = np.array([as_number(txn.amount) for txn in txns], dtype=float)
        # Single members and flat categories give no usable dispersion.
        if len(amounts) < 2 or amounts.std() == 0:
            continue
        deviations = _deviations(amounts, Baseline(config.baseline))
        for txn, deviation in zip(txns, deviations.tolist()):
            if np.isnan(deviation) or abs(deviation) <= config.threshold:
                continue
            anomalies.append(
                AnomalyRecord(
                    transaction=txn,
                    deviation=deviation,
                    severity=Severity.HIGH if abs(deviation) > config.high_threshold else Severity.MEDIUM,
                    reason="Unusually high spending" if deviation > 0 else "Unusually low spending",
                )
            )

    anomalies.sort(key=lambda record: -abs(record.deviation))
    return anomalies[: config.max_results]


__all__ = [
    "AnomalyConfig",
    "AnomalyRecord",
    "Baseline",
    "Severity",
    "detect_anomalies",
]
