"""Schemas for FIRE and goal planning."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class FireRequest(BaseModel):
    current_wealth: float = Field(..., ge=0.0, examples=[500000])
    annual_expenses: float = Field(..., ge=0.0, examples=[600000])
    monthly_contribution: float = Field(0.0, ge=0.0, examples=[25000])
    current_age: float = Field(..., ge=0.0, examples=[30])
    target_age: float = Field(..., ge=0.0, examples=[45])
    expected_return: float = Field(0.12, description="Annual return as a decimal.")
    withdrawal_rate: float = Field(0.04, gt=0.0, le=1.0)


class FireResponse(BaseModel):
    fire_number: float
    progress: float
    years_to_fire: float | None = Field(default=None, description="Null when the target is unreachable.")
    fire_age: float | None = None
    on_track: bool


class GoalRequest(BaseModel):
    current_net_worth: float
    target_net_worth: float
    target_date: Optional[date] = None
    reference_date: Optional[date] = None


class GoalResponse(BaseModel):
    progress: float
    days_remaining: int
    months_remaining: int
    gap: float
    monthly_savings_needed: float
    milestone: str


__all__ = ["FireRequest", "FireResponse", "GoalRequest", "GoalResponse"]
