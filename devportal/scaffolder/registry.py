"""Scaffolder template actions and their registry.

A template action has an id (e.g. ``drn:pending:list``), pydantic models
for its input and output, and an async handler that receives an
ActionContext. The registry validates input before the handler runs and
validates the collected outputs after it returns.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from devportal.domain.exceptions import ActionNotFoundError, ValidationException
from devportal.shared.telemetry.tracing import traced

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionExample:
    """Documented usage of an action inside a template."""

    description: str
    example: str


@dataclass
class ActionContext:
    """What a handler sees: validated input, a logger, and an output sink."""

    input: BaseModel | None
    logger: logging.Logger
    outputs: dict[str, Any] = field(default_factory=dict)

    def output(self, key: str, value: Any) -> None:
        """Record an output value under key (last write wins)."""
        self.outputs[key] = value


ActionHandler = Callable[[ActionContext], Awaitable[None]]


@dataclass(frozen=True)
class TemplateAction:
    """A scaffolder action definition."""

    id: str
    description: str
    handler: ActionHandler
    input_model: type[BaseModel] | None = None
    output_model: type[BaseModel] | None = None
    examples: tuple[ActionExample, ...] = ()


class ActionRegistry:
    """Holds template actions by id and runs them with validation."""

    def __init__(self) -> None:
        self._actions: dict[str, TemplateAction] = {}

    def register(self, action: TemplateAction) -> None:
        """Add an action. Raises ValueError when the id is already taken."""
        if action.id in self._actions:
            raise ValueError(f"Scaffolder action already registered: {action.id}")
        self._actions[action.id] = action
        logger.debug("Registered scaffolder action %s", action.id)

    def get(self, action_id: str) -> TemplateAction:
        action = self._actions.get(action_id)
        if action is None:
            raise ActionNotFoundError(action_id)
        return action

    def list(self) -> list[TemplateAction]:
        return sorted(self._actions.values(), key=lambda a: a.id)

    @traced("scaffolder.run_action")
    async def run(
        self,
        action_id: str,
        raw_input: dict[str, Any] | None = None,
        action_logger: logging.Logger | None = None,
    ) -> dict[str, Any]:
        """Validate input, run the handler, and return validated outputs as JSON data.

        Raises:
            ActionNotFoundError: No action with this id.
            ValidationException: Input or output does not match the action's models.
        """
        action = self.get(action_id)
        parsed_input: BaseModel | None = None
        if action.input_model is not None:
            try:
                parsed_input = action.input_model.model_validate(raw_input or {})
            except ValidationError as e:
                raise ValidationException(
                    f"Invalid input for action {action_id}: {e.errors()[0]['msg']}",
                    field="input",
                ) from e

        ctx = ActionContext(
            input=parsed_input,
            logger=action_logger or logging.getLogger(f"scaffolder.{action_id}"),
        )
        await action.handler(ctx)

        if action.output_model is None:
            return ctx.outputs
        try:
            output = action.output_model.model_validate(ctx.outputs)
        except ValidationError as e:
            raise ValidationException(
                f"Action {action_id} produced invalid output: {e.errors()[0]['msg']}",
                field="output",
            ) from e
        return output.model_dump(mode="json")
