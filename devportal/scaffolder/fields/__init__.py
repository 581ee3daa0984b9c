"""Scaffolder form fields: Databricks workspace name availability."""

from devportal.scaffolder.fields.availability import (
    AvailabilityMemo,
    WorkspaceAvailabilityChecker,
    default_memo,
)
from devportal.scaffolder.fields.naming import build_final_name, domain_char, kebabize
from devportal.scaffolder.fields.workspace_name import (
    FieldStatus,
    FieldValidation,
    WorkspaceNameField,
    validate_workspace_name_on_submit,
)

__all__ = [
    "AvailabilityMemo",
    "FieldStatus",
    "FieldValidation",
    "WorkspaceAvailabilityChecker",
    "WorkspaceNameField",
    "build_final_name",
    "default_memo",
    "domain_char",
    "kebabize",
    "validate_workspace_name_on_submit",
]
