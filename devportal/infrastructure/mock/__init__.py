"""Static DRN records used until a real DRN store is wired in."""

from devportal.infrastructure.mock.drn_source import MockDrnSource

__all__ = ["MockDrnSource"]
