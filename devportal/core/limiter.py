"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the
same instance without circular imports. The workspace name check is the
only limited route: each uncached call costs an upstream list fetch.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from devportal.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _ws_validate_limit() -> str:
    return get_settings().ws_validate_rate_limit


limit_ws_validate = limiter.limit(_ws_validate_limit)
