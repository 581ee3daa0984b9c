"""Domain exceptions for the developer-portal plugins.

Presentation layer maps them to HTTP responses in exception handlers,
except the workspace availability routes which report every failure as
a 500 with the exception message.
"""

from typing import Any


class DevPortalException(Exception):
    """Base exception for all devportal errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, status_code).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DevPortalException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class WorkspaceNameValidationError(ValidationException):
    """Workspace name failed a syntax rule. Raised before any upstream call."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field="name")


class UpstreamError(DevPortalException):
    """Base for failures talking to the Databricks account API."""


class UpstreamAuthError(UpstreamError):
    """Token endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Databricks token error: {status_code}",
            "UPSTREAM_AUTH_ERROR",
            {"status_code": status_code},
        )
        self.status_code = status_code


class UpstreamListError(UpstreamError):
    """Workspace list endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Databricks workspace error: {status_code}",
            "UPSTREAM_LIST_ERROR",
            {"status_code": status_code},
        )
        self.status_code = status_code


class UpstreamProtocolError(UpstreamError):
    """Upstream response body was not the expected JSON shape."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "UPSTREAM_PROTOCOL_ERROR")


class DatabricksNotConfiguredError(DevPortalException):
    """Databricks credentials are missing from settings."""

    def __init__(self) -> None:
        super().__init__(
            "Databricks is not configured. Set DATABRICKS_BASE_URL, "
            "DATABRICKS_ACCOUNT_ID, DATABRICKS_CLIENT_ID and DATABRICKS_CLIENT_SECRET.",
            "DATABRICKS_NOT_CONFIGURED",
        )


class ActionNotFoundError(DevPortalException):
    """No scaffolder action is registered under the requested id."""

    def __init__(self, action_id: str) -> None:
        super().__init__(
            f"Scaffolder action not found: {action_id}",
            "ACTION_NOT_FOUND",
            {"action_id": action_id},
        )


class AvailabilityCheckError(DevPortalException):
    """Availability backend answered with something other than 200 or 400."""

    def __init__(self, message: str = "Workspace name validation failed") -> None:
        super().__init__(message, "AVAILABILITY_CHECK_ERROR")


class DrnViewerClientError(DevPortalException):
    """DRN viewer backend answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, "DRN_VIEWER_CLIENT_ERROR", {"status_code": status_code})
        self.status_code = status_code
