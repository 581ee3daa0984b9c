"""Scaffolder action discovery and execution."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from devportal.api.v1.dependencies import get_action_registry
from devportal.schemas.scaffolder import (
    ActionListResponse,
    ActionRunResponse,
    ActionSummary,
)
from devportal.scaffolder.registry import ActionRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/actions", response_model=ActionListResponse)
def list_actions(
    registry: Annotated[ActionRegistry, Depends(get_action_registry)],
) -> ActionListResponse:
    """Installed template actions, sorted by id."""
    return ActionListResponse(
        actions=[
            ActionSummary(id=action.id, description=action.description)
            for action in registry.list()
        ]
    )


@router.post("/actions/{action_id}/run", response_model=ActionRunResponse)
async def run_action(
    action_id: str,
    registry: Annotated[ActionRegistry, Depends(get_action_registry)],
    action_input: Annotated[dict[str, Any] | None, Body()] = None,
) -> ActionRunResponse:
    """Run one action with a JSON object as input and return its outputs.

    Unknown ids are 404 and invalid input is 400 (centralized handlers).
    """
    output = await registry.run(action_id, action_input, action_logger=logger)
    return ActionRunResponse(action_id=action_id, output=output)
