"""Asset-class drift against a target allocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping

from .records import Holding, as_number

DEFAULT_TARGET_ALLOCATION = {"Equity": 60.0, "Debt": 25.0, "Gold": 10.0, "Cash": 5.0}
DEFAULT_DRIFT_BAND = 5.0
DEFAULT_ASSET_CLASS = "Equity"


class RebalanceAction(str, Enum):
    BUY = "Buy"
    SELL = "Sell"


@dataclass(frozen=True)
class RebalancingConfig:
    target_allocation: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_TARGET_ALLOCATION))
    drift_band: float = DEFAULT_DRIFT_BAND

    def __post_init__(self):
        if self.drift_band < 0:
            raise ValueError("drift_band must be >= 0")
        if any(weight < 0 for weight in self.target_allocation.values()):
            raise ValueError("target weights must be >= 0")


@dataclass(frozen=True)
class RebalanceSuggestion:
    asset_class: str
    action: RebalanceAction
    amount: float
    reason: str


@dataclass(frozen=True)
class RebalancingPlan:
    total: float
    current_allocation: dict[str, float]
    suggestions: list[RebalanceSuggestion]
    score: float


def suggest_rebalancing(
    holdings: Iterable[Holding],
    *,
    config: RebalancingConfig | None = None,
) -> RebalancingPlan:
    """Suggest trades for every asset class drifting beyond the band.

    Holdings without an asset class count as equity. The score starts at 100
    and loses one point per percent of the portfolio that would have to move.
    """

    config = config or RebalancingConfig()
    by_class: dict[str, float] = {}
    for holding in holdings:
        asset_class = holding.asset_class or DEFAULT_ASSET_CLASS
        by_class[asset_class] = by_class.get(asset_class, 0.0) + max(0.0, as_number(holding.current_value))
    total = sum(by_class.values())
    if total <= 0:
        return RebalancingPlan(
            total=0.0,
            current_allocation={asset_class: 0.0 for asset_class in config.target_allocation},
            suggestions=[],
            score=100.0,
        )

    current: dict[str, float] = {}
    suggestions: list[RebalanceSuggestion] = []
    for asset_class, target in config.target_allocation.items():
        actual = by_class.get(asset_class, 0.0) / total * 100.0
        current[asset_class] = actual
        diff = actual - target
        if abs(diff) <= config.drift_band:
            continue
        over = diff > 0
        suggestions.append(
            RebalanceSuggestion(
                asset_class=asset_class,
                action=RebalanceAction.SELL if over else RebalanceAction.BUY,
                amount=abs(diff) / 100.0 * total,
                reason=f"{'Over' if over else 'Under'}-allocated by {abs(diff):.0f}%",
            )
        )

    drift = sum(suggestion.amount / total * 100.0 for suggestion in suggestions)
    return RebalancingPlan(
        total=total,
        current_allocation=current,
        suggestions=suggestions,
        score=max(0.0, 100.0 - drift),
    )


__all__ = [
    "DEFAULT_TARGET_ALLOCATION",
    "RebalanceAction",
    "RebalanceSuggestion",
    "RebalancingConfig",
    "RebalancingPlan",
    "suggest_rebalancing",
]
