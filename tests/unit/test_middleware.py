"""Raw ASGI middleware: request ID and timeout."""

import asyncio

from httpx import ASGITransport, AsyncClient

from devportal.middleware import RequestIDMiddleware, TimeoutMiddleware
from devportal.middleware.request_id import resolve_request_id


async def _ok_app(scope, receive, send) -> None:
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"ok"})


async def _slow_app(scope, receive, send) -> None:
    await asyncio.sleep(1)
    await _ok_app(scope, receive, send)


def _client(asgi_app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=asgi_app), base_url="http://test")


def test_resolve_request_id_keeps_safe_values() -> None:
    assert resolve_request_id("  abc-123_X ") == "abc-123_X"


def test_resolve_request_id_replaces_unsafe_values() -> None:
    for raw in (None, "", "has space", "x" * 65, "bad\nvalue"):
        generated = resolve_request_id(raw)
        assert generated != raw
        assert len(generated) == 36


async def test_request_id_is_echoed() -> None:
    async with _client(RequestIDMiddleware(_ok_app)) as client:
        response = await client.get("/", headers={"X-Request-ID": "req-1"})
    assert response.headers["x-request-id"] == "req-1"


async def test_request_id_is_generated() -> None:
    async with _client(RequestIDMiddleware(_ok_app)) as client:
        response = await client.get("/")
    assert len(response.headers["x-request-id"]) == 36


async def test_timeout_returns_504_error_body() -> None:
    async with _client(TimeoutMiddleware(_slow_app, timeout_seconds=0.01)) as client:
        response = await client.get("/slow")
    assert response.status_code == 504
    assert response.json() == {"error": "Request timed out after 0.01 seconds"}


async def test_fast_request_passes_through() -> None:
    async with _client(TimeoutMiddleware(_ok_app, timeout_seconds=1)) as client:
        response = await client.get("/")
    assert response.status_code == 200
    assert response.text == "ok"
