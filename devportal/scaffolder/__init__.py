"""Scaffolder pieces: template actions and form-field validators."""

from devportal.scaffolder.module import create_action_registry
from devportal.scaffolder.registry import (
    ActionContext,
    ActionExample,
    ActionRegistry,
    TemplateAction,
)

__all__ = [
    "ActionContext",
    "ActionExample",
    "ActionRegistry",
    "TemplateAction",
    "create_action_registry",
]
