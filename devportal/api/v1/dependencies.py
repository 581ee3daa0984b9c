"""Presentation-layer dependency injection (composition root).

Everything here reads objects built once in the lifespan from
``request.app.state``; routes never construct clients themselves. Tests
swap collaborators by assigning to ``app.state`` or with
``app.dependency_overrides``.
"""

from fastapi import Request

from devportal.application.interfaces import IDrnSource, IWorkspaceNameService
from devportal.scaffolder.registry import ActionRegistry


def get_workspace_name_service(request: Request) -> IWorkspaceNameService | None:
    """Process-wide Databricks client, or None when credentials are missing.

    The availability routes report a missing client as a 500 like any
    other failure, so the None case is handled in the route.
    """
    return getattr(request.app.state, "databricks_client", None)


def get_drn_source(request: Request) -> IDrnSource:
    """DRN record source (mock data until a real store is wired)."""
    return request.app.state.drn_source


def get_action_registry(request: Request) -> ActionRegistry:
    """Registry of scaffolder template actions."""
    return request.app.state.action_registry
