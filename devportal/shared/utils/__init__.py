"""Utility helpers."""

from devportal.shared.utils.clock import Clock, monotonic_clock

__all__ = ["Clock", "monotonic_clock"]
