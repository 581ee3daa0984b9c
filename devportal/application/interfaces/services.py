"""Service interfaces (ports) for the application layer.

Routes and scaffolder actions depend on these protocols; tests replace
the implementations with AsyncMock objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from devportal.domain.entities import DrnEntity


class IDrnSource(Protocol):
    """Protocol for reading DRN approval requests."""

    async def list_documents(self, include_approved: bool = False) -> list[DrnEntity]:
        """Return pending DRNs, or every DRN when include_approved is True."""


class IWorkspaceNameService(Protocol):
    """Protocol for workspace name availability (implemented by DatabricksClient)."""

    async def is_name_available(self, name: str) -> bool:
        """Return True if no existing workspace has this name (case-insensitive)."""

    async def list_workspace_names_cached(self) -> list[str]:
        """Return existing workspace names, possibly from cache."""
