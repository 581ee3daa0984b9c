"""Clock used for cache deadlines.

Deadlines are compared against a monotonic clock so wall-clock jumps
never extend or cut short a TTL. Tests inject their own callable.
"""

import time
from collections.abc import Callable

Clock = Callable[[], float]


def monotonic_clock() -> float:
    """Return monotonic seconds."""
    return time.monotonic()
