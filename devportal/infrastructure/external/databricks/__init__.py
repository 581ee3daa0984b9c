"""Databricks account API client (token grant, workspace list, name availability)."""

from devportal.infrastructure.external.databricks.client import (
    DEFAULT_TOKEN_TTL_SECONDS,
    DEFAULT_WORKSPACE_TTL_SECONDS,
    DatabricksClient,
)

__all__ = [
    "DEFAULT_TOKEN_TTL_SECONDS",
    "DEFAULT_WORKSPACE_TTL_SECONDS",
    "DatabricksClient",
]
