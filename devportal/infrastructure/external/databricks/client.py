"""Databricks account API client: token grant, workspace list, name availability.

Two single-slot TTL caches sit in front of a rate-sensitive upstream:
the OAuth2 client-credentials token (default 50 min) and the list of
existing workspace names (default 2 min). The list is only fetched with
a fresh token, and name syntax is checked before either cache is touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from devportal.domain.exceptions import (
    DatabricksNotConfiguredError,
    UpstreamAuthError,
    UpstreamListError,
    UpstreamProtocolError,
)
from devportal.domain.value_objects.workspace_name import WorkspaceName
from devportal.infrastructure.cache.ttl_slot import TTLSlot
from devportal.shared.telemetry.logging import get_logger
from devportal.shared.telemetry.tracing import add_span_attributes, traced
from devportal.shared.utils.clock import Clock, monotonic_clock

if TYPE_CHECKING:
    from devportal.core.config import Settings

logger = get_logger(__name__)

DEFAULT_TOKEN_TTL_SECONDS = 50 * 60
DEFAULT_WORKSPACE_TTL_SECONDS = 2 * 60

_TOKEN_PARSE_ERROR = "Failed to parse Databricks token response"
_WORKSPACES_PARSE_ERROR = "Failed to parse Databricks workspaces response"


class DatabricksClient:
    """Client for the Databricks account API with token and workspace caches.

    The caches belong to the instance; create one client per process and
    share it (see ``devportal.core.lifespan``).
    """

    def __init__(
        self,
        base_url: str,
        account_id: str,
        client_id: str,
        client_secret: str,
        http_client: httpx.AsyncClient,
        token_ttl_seconds: float = DEFAULT_TOKEN_TTL_SECONDS,
        workspace_ttl_seconds: float = DEFAULT_WORKSPACE_TTL_SECONDS,
        clock: Clock = monotonic_clock,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.account_id = account_id
        self.client_id = client_id
        self.client_secret = client_secret
        self._http = http_client
        self._clock = clock
        self.token_cache: TTLSlot[str] = TTLSlot(
            token_ttl_seconds, clock=clock, name="databricks:token"
        )
        self.workspace_names_cache: TTLSlot[list[str]] = TTLSlot(
            workspace_ttl_seconds, clock=clock, name="databricks:workspaces"
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: httpx.AsyncClient,
        clock: Clock = monotonic_clock,
    ) -> DatabricksClient:
        """Build a client from application settings.

        Raises:
            DatabricksNotConfiguredError: If any credential setting is empty.
        """
        if not settings.databricks_configured:
            raise DatabricksNotConfiguredError()
        return cls(
            base_url=settings.databricks_base_url,
            account_id=settings.databricks_account_id,
            client_id=settings.databricks_client_id,
            client_secret=settings.databricks_client_secret.get_secret_value(),
            http_client=http_client,
            token_ttl_seconds=settings.databricks_token_ttl_seconds,
            workspace_ttl_seconds=settings.databricks_workspace_ttl_seconds,
            clock=clock,
        )

    @property
    def token_url(self) -> str:
        return f"{self.base_url}/oidc/accounts/{self.account_id}/v1/token"

    @property
    def workspace_url(self) -> str:
        return f"{self.base_url}/api/2.0/accounts/{self.account_id}/workspaces"

    @traced("databricks.get_access_token")
    async def get_access_token(self) -> str:
        """Return a bearer token, fetching one only when the cached token expired.

        Raises:
            UpstreamAuthError: Token endpoint returned a non-2xx status.
            UpstreamProtocolError: Body is not JSON or has no string access_token.
        """
        now = self._clock()
        cached = self.token_cache.get()
        if cached is not None:
            add_span_attributes(cache_hit=True)
            return cached

        logger.debug("Databricks token cache miss, fetching new token")
        add_span_attributes(cache_hit=False)
        response = await self._http.post(
            self.token_url,
            data={
                "grant_type": "client_credentials",
                "scope": "all-apis",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        if not response.is_success:
            logger.error(
                "Databricks token error: status=%d body=%s",
                response.status_code,
                response.text,
            )
            raise UpstreamAuthError(response.status_code)

        payload = _parse_json(response, _TOKEN_PARSE_ERROR)
        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(access_token, str) or not access_token:
            logger.error("%s: missing access_token", _TOKEN_PARSE_ERROR)
            raise UpstreamProtocolError(_TOKEN_PARSE_ERROR)

        self.token_cache.set(access_token, now=now)
        return access_token

    @traced("databricks.list_workspace_names")
    async def list_workspace_names_cached(self) -> list[str]:
        """Return existing workspace names, refreshing the cached list when expired.

        A warm cache answers without touching the token cache or the network.

        Raises:
            UpstreamAuthError: Token refresh failed.
            UpstreamListError: Workspace endpoint returned a non-2xx status.
            UpstreamProtocolError: Body is not a JSON array of workspace objects.
        """
        now = self._clock()
        cached = self.workspace_names_cache.get()
        if cached is not None:
            add_span_attributes(cache_hit=True)
            return cached

        logger.debug("Databricks workspace cache miss, fetching new names")
        add_span_attributes(cache_hit=False)
        token = await self.get_access_token()
        response = await self._http.get(
            self.workspace_url,
            headers={"Authorization": f"Bearer {token}"},
        )
        if not response.is_success:
            logger.error(
                "Databricks workspace error: status=%d body=%s",
                response.status_code,
                response.text,
            )
            raise UpstreamListError(response.status_code)

        payload = _parse_json(response, _WORKSPACES_PARSE_ERROR)
        names = _extract_workspace_names(payload)
        self.workspace_names_cache.set(names, now=now)
        add_span_attributes(count=len(names))
        return names

    async def is_name_available(self, name: str) -> bool:
        """Return True unless name (trimmed) matches an existing workspace, ignoring case.

        Raises:
            WorkspaceNameValidationError: Name breaks a syntax rule. Raised
                before any cache lookup or network call.
        """
        candidate = WorkspaceName.parse(name)
        names = await self.list_workspace_names_cached()
        return not any(candidate.matches(existing) for existing in names)


def _parse_json(response: httpx.Response, error_message: str) -> Any:
    """Decode a JSON body or raise UpstreamProtocolError."""
    try:
        return response.json()
    except ValueError as e:
        logger.error("%s: %s", error_message, e)
        raise UpstreamProtocolError(error_message) from e


def _extract_workspace_names(payload: Any) -> list[str]:
    """Pull non-empty workspace_name values out of the workspace list body."""
    if not isinstance(payload, list):
        logger.error("%s: expected a list, got %s", _WORKSPACES_PARSE_ERROR, type(payload).__name__)
        raise UpstreamProtocolError(_WORKSPACES_PARSE_ERROR)
    names: list[str] = []
    for workspace in payload:
        if not isinstance(workspace, dict):
            logger.error("%s: workspace entry is not an object", _WORKSPACES_PARSE_ERROR)
            raise UpstreamProtocolError(_WORKSPACES_PARSE_ERROR)
        name = workspace.get("workspace_name")
        if isinstance(name, str) and name:
            names.append(name)
    return names
