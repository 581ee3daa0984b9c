"""Scaffolder module: registers the DRN actions.

Built once in the app lifespan; routes read the registry from app.state.
"""

from devportal.application.interfaces import IDrnSource
from devportal.core.config import Settings
from devportal.scaffolder.actions import create_drn_pending_list_action
from devportal.scaffolder.registry import ActionRegistry


def create_action_registry(settings: Settings, drn_source: IDrnSource) -> ActionRegistry:
    """Return a registry with every DRN action registered."""
    registry = ActionRegistry()
    registry.register(
        create_drn_pending_list_action(
            drn_source,
            app_base_url=settings.app_base_url,
            approval_template_path=settings.drn_approval_template_path,
        )
    )
    return registry
