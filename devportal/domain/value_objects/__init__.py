"""Domain value objects."""

from devportal.domain.value_objects.workspace_name import (
    WorkspaceName,
    validate_workspace_name,
)

__all__ = ["WorkspaceName", "validate_workspace_name"]
