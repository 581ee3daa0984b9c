"""Workspace name availability endpoints.

Unlike the rest of the API these routes answer every failure themselves
with ``{"error": <message>}``: a taken name is a 400, and validation,
configuration and upstream errors are all 500s carrying the exception
message. The scaffolder field relies on exactly this contract.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from devportal.api.v1.dependencies import get_workspace_name_service
from devportal.application.interfaces import IWorkspaceNameService
from devportal.core.limiter import limit_ws_validate
from devportal.domain.exceptions import DatabricksNotConfiguredError
from devportal.schemas.databricks import (
    ErrorResponse,
    WorkspaceAvailableResponse,
    WorkspaceNamesResponse,
)
from devportal.shared.telemetry import set_span_error

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Name missing or already taken"},
    500: {"model": ErrorResponse, "description": "Validation or upstream failure"},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _message(exc: Exception, fallback: str) -> str:
    return getattr(exc, "message", None) or str(exc) or fallback


@router.get("/ws-validate", include_in_schema=False)
@router.get("/ws-validate/", include_in_schema=False)
async def workspace_name_required() -> JSONResponse:
    """No name segment at all; query parameters are never read as the name."""
    return _error(400, "name is required")


# The path convertor keeps encoded slashes inside the name so the syntax
# check rejects them instead of routing falling through to a 404.
@router.get(
    "/ws-validate/{name:path}",
    response_model=WorkspaceAvailableResponse,
    responses=_ERROR_RESPONSES,
)
@limit_ws_validate
async def validate_workspace_name(
    request: Request,
    service: Annotated[
        IWorkspaceNameService | None, Depends(get_workspace_name_service)
    ],
    name: str,
) -> WorkspaceAvailableResponse | JSONResponse:
    """200 when no existing workspace has this name (case-insensitive), 400 when taken."""
    name = name.strip()
    if not name:
        return _error(400, "name is required")
    try:
        if service is None:
            raise DatabricksNotConfiguredError()
        available = await service.is_name_available(name)
    except Exception as e:
        logger.error('Failed to validate workspace name "%s"', name, exc_info=True)
        set_span_error(e)
        return _error(500, _message(e, "Workspace name validation failed"))
    if not available:
        return _error(400, "Workspace name already exists")
    return WorkspaceAvailableResponse(available=True)


@router.get(
    "/workspaces",
    response_model=WorkspaceNamesResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_workspace_names(
    service: Annotated[
        IWorkspaceNameService | None, Depends(get_workspace_name_service)
    ],
) -> WorkspaceNamesResponse | JSONResponse:
    """Existing workspace names (served from the short-lived list cache)."""
    try:
        if service is None:
            raise DatabricksNotConfiguredError()
        names = await service.list_workspace_names_cached()
    except Exception as e:
        logger.error("Failed to list workspace names", exc_info=True)
        set_span_error(e)
        return _error(500, _message(e, "Failed to list workspace names"))
    return WorkspaceNamesResponse(names=names)
