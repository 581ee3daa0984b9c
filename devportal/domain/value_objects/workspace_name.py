"""Workspace name value object and syntax rules.

Rules are checked in a fixed order and the first failure wins, so the
rejection reason always names the earliest rule the name violates.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from devportal.domain.exceptions import WorkspaceNameValidationError

_WORKSPACE_NAME_RE = re.compile(r"[a-zA-Z0-9-]+")

WORKSPACE_NAME_MIN_LENGTH = 3
WORKSPACE_NAME_MAX_LENGTH = 64


def validate_workspace_name(name: str) -> None:
    """Raise WorkspaceNameValidationError if name breaks a syntax rule.

    Expects an already trimmed name.
    """
    if not name:
        raise WorkspaceNameValidationError("Workspace name cannot be empty.")
    if not WORKSPACE_NAME_MIN_LENGTH <= len(name) <= WORKSPACE_NAME_MAX_LENGTH:
        raise WorkspaceNameValidationError(
            f"Workspace name must be between {WORKSPACE_NAME_MIN_LENGTH} "
            f"and {WORKSPACE_NAME_MAX_LENGTH} characters."
        )
    if name.startswith("-") or name.endswith("-"):
        raise WorkspaceNameValidationError(
            "Workspace name cannot start or end with a hyphen."
        )
    if not _WORKSPACE_NAME_RE.fullmatch(name):
        raise WorkspaceNameValidationError(
            "Workspace name can only contain letters, numbers, and hyphens."
        )


@dataclass(frozen=True)
class WorkspaceName:
    """Trimmed, syntax-checked workspace name.

    Equality with other names is case-insensitive via ``key``.
    """

    value: str

    MIN_LENGTH: ClassVar[int] = WORKSPACE_NAME_MIN_LENGTH
    MAX_LENGTH: ClassVar[int] = WORKSPACE_NAME_MAX_LENGTH

    def __post_init__(self) -> None:
        validate_workspace_name(self.value)

    @classmethod
    def parse(cls, raw: str) -> "WorkspaceName":
        """Trim raw input and validate it."""
        return cls((raw or "").strip())

    @property
    def key(self) -> str:
        """Case-folded form used for uniqueness comparisons."""
        return self.value.lower()

    def matches(self, existing: str) -> bool:
        """Return True if existing names the same workspace (case-insensitive)."""
        return existing.lower() == self.key
