"""Core: config, rate limits, lifespan, and exception handlers."""

from devportal.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
