"""Monte Carlo wealth projection.

Each trial walks the horizon month by month: the balance is compounded by a
normally distributed monthly return and the contribution is added after the
shock. Final balances are reduced to p10/p50/p90 and the share of trials that
reached the target.

Invalid numerics are clamped rather than rejected:

* NaN or negative volatility becomes 0, NaN mean return becomes 0.
* NaN or negative principal/contribution becomes 0.
* A NaN target can never be met.
* The balance is floored at 0 after every month, so outcomes are never
  negative even under extreme volatility.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .random_source import RandomSource, SeededRandomSource

logger = logging.getLogger(__name__)

DEFAULT_TRIALS = 1000
DEFAULT_MEAN_RETURN = 0.12
DEFAULT_VOLATILITY = 0.15
PERCENTILE_LEVELS = {"p10": 0.10, "p50": 0.50, "p90": 0.90}


@dataclass(frozen=True)
class SimulationConfig:
    """Tunables for the projector.

    Attributes:
        trials: Number of independent paths. Default 1000; 0 is allowed and
            yields the degenerate result.
        seed: Seed for the default random source. ``None`` draws from OS
            entropy; ignored when a ``random_source`` is passed explicitly.
    """

    trials: int = DEFAULT_TRIALS
    seed: int | None = None

    def __post_init__(self):
        if self.trials < 0:
            raise ValueError("trials must be >= 0")


@dataclass(frozen=True)
class Percentiles:
    p10: float
    p50: float
    p90: float


@dataclass(frozen=True)
class SimulationResult:
    percentiles: Percentiles
    success_probability: float
    trials: int
    months: int
    outcomes: list[float] = field(default_factory=list)


def _clean(value: float, *, floor: float | None = 0.0, nan_value: float = 0.0) -> float:
    value = float(value) if value is not None else nan_value
    if math.isnan(value):
        return nan_value
    if floor is not None and value < floor:
        return floor
    return value


def _percentile(sorted_values: list[float], level: float) -> float:
    index = min(int(math.floor(len(sorted_values) * level)), len(sorted_values) - 1)
    return sorted_values[max(index, 0)]


def simulate(
    principal: float,
    monthly_contribution: float,
    years: float,
    target_wealth: float,
    mean_return: float = DEFAULT_MEAN_RETURN,
    volatility: float = DEFAULT_VOLATILITY,
    *,
    random_source: RandomSource | None = None,
    config: SimulationConfig | None = None,
    include_outcomes: bool = False,
) -> SimulationResult:
    """Project final wealth over ``years`` and estimate the odds of hitting a target."""

    config = config or SimulationConfig()
    principal = _clean(principal)
    monthly_contribution = _clean(monthly_contribution)
    mean_return = _clean(mean_return, floor=None)
    volatility = _clean(volatility)
    target_wealth = _clean(target_wealth, floor=None, nan_value=math.inf)
    years = _clean(years, floor=None)

    if not math.isfinite(years) or years <= 0 or config.trials <= 0:
        return SimulationResult(
            percentiles=Percentiles(p10=principal, p50=principal, p90=principal),
            success_probability=0.0,
            trials=0,
            months=0,
        )

    source = random_source or SeededRandomSource(config.seed)
    months = int(round(years * 12))
    monthly_mean = mean_return / 12
    monthly_volatility = volatility / math.sqrt(12)

    outcomes: list[float] = []
    successes = 0
    for _ in range(config.trials):
        wealth = principal
        for _ in range(months):
            shock = source.standard_normal()
            period_return = monthly_mean + monthly_volatility * shock
            wealth = max(0.0, wealth * (1 + period_return) + monthly_contribution)
        outcomes.append(wealth)
        if wealth >= target_wealth:
            successes += 1

    outcomes.sort()
    trials = len(outcomes)
    percentiles = Percentiles(
        **{name: _percentile(outcomes, level) for name, level in PERCENTILE_LEVELS.items()}
    )
    success_probability = 100.0 * successes / trials
    logger.debug(
        "Projected %s trials over %s months: p50=%.2f success=%.1f%%",
        trials,
        months,
        percentiles.p50,
        success_probability,
    )
    return SimulationResult(
        percentiles=percentiles,
        success_probability=success_probability,
        trials=trials,
        months=months,
        outcomes=outcomes if include_outcomes else [],
    )


__all__ = [
    "DEFAULT_MEAN_RETURN",
    "DEFAULT_TRIALS",
    "DEFAULT_VOLATILITY",
    "Percentiles",
    "SimulationConfig",
    "SimulationResult",
    "simulate",
]
