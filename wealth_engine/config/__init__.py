"""Configuration package for the wealth analytics service."""

from .settings import AnalyticsSettings, get_settings

__all__ = ["AnalyticsSettings", "get_settings"]
