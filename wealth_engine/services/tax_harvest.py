"""Tax-loss harvesting opportunity finder.

Uses a simplified single-rate model: the estimated saving is the unrealized
loss times one flat rate. The holding-period flag is carried on the record but
does not change the rate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .records import Holding, as_number

DEFAULT_TAX_RATE = 0.20


@dataclass(frozen=True)
class HarvestConfig:
    tax_rate: float = DEFAULT_TAX_RATE

    def __post_init__(self):
        if not 0.0 <= self.tax_rate <= 1.0:
            raise ValueError("tax_rate must be between 0 and 1")


@dataclass(frozen=True)
class HarvestOpportunity:
    holding: Holding
    unrealized_loss: float
    loss_percent: float
    potential_tax_saving: float


def find_opportunities(
    holdings: Iterable[Holding],
    *,
    config: HarvestConfig | None = None,
) -> list[HarvestOpportunity]:
    """Return holdings sitting on an unrealized loss, best saving first."""

    config = config or HarvestConfig()
    ranked: list[tuple[float, float, int, HarvestOpportunity]] = []
    for index, holding in enumerate(holdings):
        invested = as_number(holding.invested_amount)
        loss = -holding.unrealized_pnl
        if invested <= 0 or loss <= 0:
            continue
        opportunity = HarvestOpportunity(
            holding=holding,
            unrealized_loss=loss,
            loss_percent=loss / invested * 100.0,
            potential_tax_saving=loss * config.tax_rate,
        )
        ranked.append((-opportunity.potential_tax_saving, -loss, index, opportunity))
    ranked.sort(key=lambda item: item[:3])
    return [item[3] for item in ranked]


def total_tax_saving(opportunities: Iterable[HarvestOpportunity]) -> float:
    return sum(opportunity.potential_tax_saving for opportunity in opportunities)


__all__ = [
    "DEFAULT_TAX_RATE",
    "HarvestConfig",
    "HarvestOpportunity",
    "find_opportunities",
    "total_tax_saving",
]
