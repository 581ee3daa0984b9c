"""Workspace name availability API schemas."""

from pydantic import BaseModel, Field


class WorkspaceAvailableResponse(BaseModel):
    """200 body of GET /ws-validate/{name}."""

    available: bool = Field(default=True)


class WorkspaceNamesResponse(BaseModel):
    """200 body of GET /workspaces."""

    names: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body used by the availability routes (400 and 500)."""

    error: str
