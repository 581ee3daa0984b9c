"""Scaffolder action discovery schemas."""

from typing import Any

from pydantic import BaseModel


class ActionSummary(BaseModel):
    """Registered scaffolder action (id and description)."""

    id: str
    description: str


class ActionListResponse(BaseModel):
    """Response for GET /scaffolder/actions."""

    actions: list[ActionSummary]


class ActionRunResponse(BaseModel):
    """Response for POST /scaffolder/actions/{action_id}/run."""

    action_id: str
    output: dict[str, Any]
