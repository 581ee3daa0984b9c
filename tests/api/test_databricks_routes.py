"""Workspace name availability routes."""

import logging
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from devportal.core.config import get_settings
from devportal.domain.exceptions import UpstreamAuthError, WorkspaceNameValidationError
from devportal.infrastructure.external.databricks import DatabricksClient


async def test_available_name(client: AsyncClient, workspace_service: AsyncMock) -> None:
    response = await client.get("/api/v1/databricks/ws-validate/new-workspace")

    assert response.status_code == 200
    assert response.json() == {"available": True}
    workspace_service.is_name_available.assert_awaited_once_with("new-workspace")


async def test_taken_name(client: AsyncClient, workspace_service: AsyncMock) -> None:
    workspace_service.is_name_available.return_value = False

    response = await client.get("/api/v1/databricks/ws-validate/Existing-WS")

    assert response.status_code == 400
    assert response.json() == {"error": "Workspace name already exists"}


@pytest.mark.parametrize(
    "path",
    ["/api/v1/databricks/ws-validate/", "/api/v1/databricks/ws-validate", "/api/v1/databricks/ws-validate/%20%20"],
)
async def test_missing_name(client: AsyncClient, workspace_service: AsyncMock, path: str) -> None:
    response = await client.get(path)

    assert response.status_code == 400
    assert response.json() == {"error": "name is required"}
    workspace_service.is_name_available.assert_not_awaited()


async def test_name_is_trimmed(client: AsyncClient, workspace_service: AsyncMock) -> None:
    await client.get("/api/v1/databricks/ws-validate/%20my-ws%20")
    workspace_service.is_name_available.assert_awaited_once_with("my-ws")


async def test_validation_error_is_500_with_message(
    client: AsyncClient, workspace_service: AsyncMock, caplog
) -> None:
    workspace_service.is_name_available.side_effect = WorkspaceNameValidationError(
        "Workspace name must be between 3 and 64 characters."
    )

    with caplog.at_level(logging.ERROR):
        response = await client.get("/api/v1/databricks/ws-validate/ab")

    assert response.status_code == 500
    assert response.json() == {"error": "Workspace name must be between 3 and 64 characters."}
    assert 'Failed to validate workspace name "ab"' in caplog.text


async def test_upstream_error_is_500_with_message(client: AsyncClient, workspace_service: AsyncMock) -> None:
    workspace_service.is_name_available.side_effect = UpstreamAuthError(401)

    response = await client.get("/api/v1/databricks/ws-validate/my-ws")

    assert response.status_code == 500
    assert response.json() == {"error": "Databricks token error: 401"}


async def test_unexpected_error_is_500_with_message(client: AsyncClient, workspace_service: AsyncMock) -> None:
    workspace_service.is_name_available.side_effect = RuntimeError("connection reset")

    response = await client.get("/api/v1/databricks/ws-validate/my-ws")

    assert response.status_code == 500
    assert response.json() == {"error": "connection reset"}


async def test_unconfigured_client_is_500(app: FastAPI, client: AsyncClient) -> None:
    app.state.databricks_client = None

    response = await client.get("/api/v1/databricks/ws-validate/my-ws")

    assert response.status_code == 500
    assert response.json()["error"].startswith("Databricks is not configured")


async def test_list_workspaces(client: AsyncClient, workspace_service: AsyncMock) -> None:
    workspace_service.list_workspace_names_cached.return_value = ["alpha", "beta"]

    response = await client.get("/api/v1/databricks/workspaces")

    assert response.status_code == 200
    assert response.json() == {"names": ["alpha", "beta"]}


async def test_list_workspaces_failure(
    client: AsyncClient, workspace_service: AsyncMock, caplog
) -> None:
    workspace_service.list_workspace_names_cached.side_effect = UpstreamAuthError(503)

    with caplog.at_level(logging.ERROR):
        response = await client.get("/api/v1/databricks/workspaces")

    assert response.status_code == 500
    assert response.json() == {"error": "Databricks token error: 503"}
    assert "Failed to list workspace names" in caplog.text


async def test_ws_validate_is_rate_limited(
    client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("WS_VALIDATE_RATE_LIMIT", "2/minute")
    get_settings.cache_clear()
    try:
        statuses = [
            (await client.get("/api/v1/databricks/ws-validate/my-ws")).status_code
            for _ in range(3)
        ]
    finally:
        monkeypatch.delenv("WS_VALIDATE_RATE_LIMIT")
        get_settings.cache_clear()

    assert statuses == [200, 200, 429]


async def test_query_name_is_ignored_on_bare_route(client: AsyncClient, workspace_service: AsyncMock) -> None:
    response = await client.get("/api/v1/databricks/ws-validate", params={"name": "taken-ws"})

    assert response.status_code == 400
    assert response.json() == {"error": "name is required"}
    workspace_service.is_name_available.assert_not_awaited()


async def test_encoded_slash_reaches_syntax_check(app: FastAPI, client: AsyncClient) -> None:
    """A name with an encoded slash is rejected by the charset rule, never a 404."""
    upstream_calls: list[httpx.Request] = []

    def upstream(request: httpx.Request) -> httpx.Response:
        upstream_calls.append(request)
        return httpx.Response(500)

    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as http:
        app.state.databricks_client = DatabricksClient(
            base_url="https://accounts.example.com",
            account_id="acc-123",
            client_id="client-id",
            client_secret="client-secret",
            http_client=http,
        )
        response = await client.get("/api/v1/databricks/ws-validate/a%2Fb")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Workspace name can only contain letters, numbers, and hyphens."
    }
    assert upstream_calls == []
