"""Scaffolder template actions."""

from devportal.scaffolder.actions.drn_pending_list import (
    ACTION_ID as DRN_PENDING_LIST_ACTION_ID,
    create_drn_pending_list_action,
)

__all__ = ["DRN_PENDING_LIST_ACTION_ID", "create_drn_pending_list_action"]
