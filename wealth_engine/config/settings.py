"""Application configuration and environment helpers."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wealth_engine.services.anomalies import AnomalyConfig, Baseline
from wealth_engine.services.patterns import PatternConfig
from wealth_engine.services.projection import SimulationConfig
from wealth_engine.services.rebalancing import DEFAULT_TARGET_ALLOCATION, RebalancingConfig
from wealth_engine.services.runway import DEFAULT_LIQUID_TYPES
from wealth_engine.services.tax_harvest import HarvestConfig
from wealth_engine.services.trends import TrendConfig

DEFAULT_TIMEZONE = "Asia/Kolkata"


class AnalyticsSettings(BaseSettings):
    """Configuration options for the wealth analytics service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WEALTH_ENGINE_",
        extra="ignore",
    )

    app_name: str = Field(default="Wealth Analytics Engine")
    timezone: str = Field(default=DEFAULT_TIMEZONE)
    log_level: str = Field(default="INFO")

    simulation_trials: int = Field(default=1000, ge=0, le=100_000)
    simulation_seed: int | None = Field(default=None)
    default_mean_return: float = Field(default=0.12)
    default_volatility: float = Field(default=0.15, ge=0.0)
    projection_cache_ttl_seconds: int = Field(
        default=300,
        ge=0,
        description="How long identical projection requests reuse a result; 0 disables the memo.",
    )

    tax_rate: float = Field(
        default=0.20,
        ge=0.0,
        le=1.0,
        description="Flat rate applied to harvestable losses.",
    )

    recurring_dispersion_threshold: float = Field(default=0.1, gt=0.0)
    recurring_max_results: int = Field(default=10, ge=0)

    anomaly_threshold: float = Field(default=2.0, gt=0.0)
    anomaly_high_threshold: float = Field(default=3.0, gt=0.0)
    anomaly_max_results: int = Field(default=5, ge=0)
    anomaly_baseline: Literal["leave_one_out", "population"] = Field(default="leave_one_out")

    trend_stable_band_percent: float = Field(default=5.0, ge=0.0)

    runway_liquid_types: list[str] = Field(default_factory=lambda: list(DEFAULT_LIQUID_TYPES))

    rebalancing_targets: dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_TARGET_ALLOCATION))
    rebalancing_drift_band: float = Field(default=5.0, ge=0.0)

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a dict suitable for structured logging."""

        return self.model_dump()

    def simulation_config(self, *, trials: int | None = None, seed: int | None = None) -> SimulationConfig:
        return SimulationConfig(
            trials=self.simulation_trials if trials is None else trials,
            seed=self.simulation_seed if seed is None else seed,
        )

    def harvest_config(self) -> HarvestConfig:
        return HarvestConfig(tax_rate=self.tax_rate)

    def pattern_config(self) -> PatternConfig:
        return PatternConfig(
            dispersion_threshold=self.recurring_dispersion_threshold,
            max_results=self.recurring_max_results,
        )

    def anomaly_config(self) -> AnomalyConfig:
        return AnomalyConfig(
            threshold=self.anomaly_threshold,
            high_threshold=self.anomaly_high_threshold,
            max_results=self.anomaly_max_results,
            baseline=Baseline(self.anomaly_baseline),
        )

    def trend_config(self) -> TrendConfig:
        return TrendConfig(stable_band_percent=self.trend_stable_band_percent)

    def rebalancing_config(self) -> RebalancingConfig:
        return RebalancingConfig(
            target_allocation=dict(self.rebalancing_targets),
            drift_band=self.rebalancing_drift_band,
        )


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AnalyticsSettings:
    """Return cached application settings with optional overrides."""

    if overrides:
        return AnalyticsSettings(**overrides)
    return AnalyticsSettings()


__all__ = [
    "AnalyticsSettings",
    "DEFAULT_TIMEZONE",
    "get_settings",
]
