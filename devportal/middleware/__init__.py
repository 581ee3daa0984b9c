"""Raw ASGI middleware: request ID propagation and request timeout."""

from devportal.middleware.request_id import RequestIDMiddleware
from devportal.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
