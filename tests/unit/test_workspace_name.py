"""Workspace name syntax rules and the WorkspaceName value object."""

import pytest

from devportal.domain.exceptions import ValidationException, WorkspaceNameValidationError
from devportal.domain.value_objects import WorkspaceName, validate_workspace_name


@pytest.mark.parametrize("name", ["abc", "my-workspace", "Sales-DRN001f", "a" * 64, "123"])
def test_valid_names(name: str) -> None:
    validate_workspace_name(name)


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("", "Workspace name cannot be empty."),
        ("ab", "Workspace name must be between 3 and 64 characters."),
        ("a" * 65, "Workspace name must be between 3 and 64 characters."),
        ("-abc", "Workspace name cannot start or end with a hyphen."),
        ("abc-", "Workspace name cannot start or end with a hyphen."),
        ("my_ws", "Workspace name can only contain letters, numbers, and hyphens."),
        ("my ws", "Workspace name can only contain letters, numbers, and hyphens."),
        ("café", "Workspace name can only contain letters, numbers, and hyphens."),
    ],
)
def test_invalid_names(name: str, message: str) -> None:
    with pytest.raises(WorkspaceNameValidationError) as exc_info:
        validate_workspace_name(name)
    assert exc_info.value.message == message


def test_first_failing_rule_wins() -> None:
    """A short name that also starts with a hyphen reports the length rule."""
    with pytest.raises(WorkspaceNameValidationError, match="between 3 and 64"):
        validate_workspace_name("-a")


def test_validation_error_is_a_validation_exception() -> None:
    with pytest.raises(ValidationException) as exc_info:
        validate_workspace_name("!!!")
    assert exc_info.value.error_code == "VALIDATION_ERROR"
    assert exc_info.value.details == {"field": "name"}


def test_parse_trims_before_validating() -> None:
    assert WorkspaceName.parse("  my-ws  ").value == "my-ws"


def test_parse_whitespace_only_is_empty() -> None:
    with pytest.raises(WorkspaceNameValidationError, match="cannot be empty"):
        WorkspaceName.parse("   ")


def test_matches_is_case_insensitive() -> None:
    name = WorkspaceName.parse("My-Workspace")
    assert name.key == "my-workspace"
    assert name.matches("MY-WORKSPACE")
    assert not name.matches("my-workspace-2")
