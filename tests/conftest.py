"""Pytest configuration and fixtures for devportal.

HTTP tests run against a fresh app from devportal.main.create_app over
httpx's ASGITransport. ASGITransport does not run the lifespan, so the
fixtures put the collaborators the lifespan would build on app.state.
"""

import os
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABRICKS_BASE_URL", "https://accounts.example.com")
os.environ.setdefault("DATABRICKS_ACCOUNT_ID", "acc-123")
os.environ.setdefault("DATABRICKS_CLIENT_ID", "client-id")
os.environ.setdefault("DATABRICKS_CLIENT_SECRET", "client-secret")
os.environ.setdefault("APP_BASE_URL", "https://portal.example.com")
os.environ.setdefault("DRN_APPROVAL_TEMPLATE_PATH", "/create/templates/default/drn-approval")

from devportal.core.config import get_settings  # noqa: E402
from devportal.core.limiter import limiter  # noqa: E402
from devportal.infrastructure.mock import MockDrnSource  # noqa: E402
from devportal.main import create_app  # noqa: E402
from devportal.scaffolder import create_action_registry  # noqa: E402

get_settings.cache_clear()


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Rate limit counters are process-wide; start every test from zero."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def workspace_service() -> AsyncMock:
    """Stand-in for the Databricks client used by the availability routes."""
    service = AsyncMock()
    service.is_name_available = AsyncMock(return_value=True)
    service.list_workspace_names_cached = AsyncMock(return_value=[])
    return service


@pytest.fixture
def app(workspace_service: AsyncMock) -> FastAPI:
    """App with the state the lifespan would have created."""
    application = create_app()
    drn_source = MockDrnSource()
    application.state.databricks_client = workspace_service
    application.state.drn_source = drn_source
    application.state.action_registry = create_action_registry(get_settings(), drn_source)
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
