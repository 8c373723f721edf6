"""Schemas for the Monte Carlo wealth projection."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProjectionRequest(BaseModel):
    principal: float = Field(..., ge=0.0, examples=[500000])
    monthly_contribution: float = Field(0.0, ge=0.0, examples=[25000])
    years: float = Field(..., gt=0.0, le=100.0, examples=[15])
    target_wealth: float = Field(..., gt=0.0, examples=[10000000])
    mean_return: float | None = Field(default=None, description="Annual mean return; defaults from settings.")
    volatility: float | None = Field(default=None, ge=0.0, description="Annual volatility; defaults from settings.")
    trials: int | None = Field(default=None, ge=0, le=100_000)
    seed: int | None = None
    include_outcomes: bool = False


class ProjectionPercentiles(BaseModel):
    p10: float
    p50: float
    p90: float


class ProjectionResponse(BaseModel):
    percentiles: ProjectionPercentiles
    success_probability: float
    trials: int
    months: int
    outcomes: list[float] | None = None


__all__ = ["ProjectionPercentiles", "ProjectionRequest", "ProjectionResponse"]
