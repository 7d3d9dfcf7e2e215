"""Core: settings, lifespan, rate limiting and exception mapping."""

from schoolpay.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
