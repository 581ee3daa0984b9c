"""Domain layer: DRN entity, enums, workspace name value object, and exceptions.

No dependencies on infrastructure or presentation.
"""

from devportal.domain.entities import DrnEntity, filter_documents
from devportal.domain.enums import DrnDecision, DrnState
from devportal.domain.exceptions import (
    ActionNotFoundError,
    AvailabilityCheckError,
    DatabricksNotConfiguredError,
    DevPortalException,
    DrnViewerClientError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamListError,
    UpstreamProtocolError,
    ValidationException,
    WorkspaceNameValidationError,
)
from devportal.domain.value_objects import WorkspaceName, validate_workspace_name

__all__ = [
    # Entities
    "DrnEntity",
    "filter_documents",
    # Enums
    "DrnDecision",
    "DrnState",
    # Exceptions
    "ActionNotFoundError",
    "AvailabilityCheckError",
    "DatabricksNotConfiguredError",
    "DevPortalException",
    "DrnViewerClientError",
    "UpstreamAuthError",
    "UpstreamError",
    "UpstreamListError",
    "UpstreamProtocolError",
    "ValidationException",
    "WorkspaceNameValidationError",
    # Value objects
    "WorkspaceName",
    "validate_workspace_name",
]
