"""Single-slot TTL cache.

Holds one value and the deadline after which it must be refilled. An
entry is usable if and only if ``expires_at > clock()``. Refills replace
the slot wholesale; nothing is ever deleted explicitly. Concurrent
refills are tolerated: the last writer wins.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from devportal.shared.utils.clock import Clock, monotonic_clock

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TTLSlot(Generic[T]):
    """One cached value with a deadline measured on an injectable clock."""

    def __init__(
        self,
        ttl_seconds: float,
        clock: Clock = monotonic_clock,
        name: str = "slot",
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be greater than 0")
        self.ttl_seconds = ttl_seconds
        self.name = name
        self._clock = clock
        self._value: T | None = None
        self._expires_at: float = 0.0

    @property
    def expires_at(self) -> float:
        """Deadline (clock seconds) of the current value; 0.0 when empty."""
        return self._expires_at

    @property
    def value(self) -> T | None:
        """Stored value regardless of freshness."""
        return self._value

    def is_fresh(self) -> bool:
        return self._value is not None and self._expires_at > self._clock()

    def get(self) -> T | None:
        if self.is_fresh():
            logger.debug("Cache HIT: %s", self.name)
            return self._value
        logger.debug("Cache MISS: %s", self.name)
        return None

    def set(self, value: T, now: float | None = None) -> None:
        """Store value with deadline ``now + ttl``.

        Callers that start a refill pass the time the refill began, so the
        deadline does not stretch by the length of the upstream call.
        """
        started = self._clock() if now is None else now
        self._value = value
        self._expires_at = started + self.ttl_seconds

    def prime(self, value: T, expires_at: float) -> None:
        """Store value with an explicit deadline (warm starts and tests)."""
        self._value = value
        self._expires_at = expires_at
