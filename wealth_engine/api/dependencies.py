"""Shared FastAPI dependencies."""

from __future__ import annotations

from wealth_engine.config import AnalyticsSettings, get_settings


def get_analytics_settings() -> AnalyticsSettings:
    """Resolve settings per request so tests can swap them via ``dependency_overrides``."""

    return get_settings()


__all__ = ["get_analytics_settings"]
