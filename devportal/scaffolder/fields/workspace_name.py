"""Databricks workspace name form field: live check while typing, definitive check on submit.

The field is headless: it holds status and helper text for whatever UI
renders it. Both checks compose the final name the same way and share
one AvailabilityMemo through the checker, so a live check that just
finished makes the submit check free.

Live check state machine::

    idle -> checking -> available | unavailable | error
    checking -> idle            (inputs became invalid before the lookup ran)

Every input change cancels the pending lookup and bumps a generation
counter; a lookup applies its result only while its generation is current.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from devportal.scaffolder.fields.availability import WorkspaceAvailabilityChecker
from devportal.scaffolder.fields.naming import build_final_name

logger = logging.getLogger(__name__)

DATABRICKS_NETWORK_TYPE = "databricks"
DEFAULT_DEBOUNCE_SECONDS = 0.8
MIN_BASE_NAME_LENGTH = 3


class FieldStatus(str, Enum):
    """Validation status shown next to the field."""

    IDLE = "idle"
    CHECKING = "checking"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


@dataclass
class FieldValidation:
    """Collects submit-time errors for one field."""

    errors: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def _text(form_data: Mapping[str, Any] | None, key: str) -> str | None:
    value = (form_data or {}).get(key)
    return value if isinstance(value, str) else None


class WorkspaceNameField:
    """Debounced, cancellable availability check for one field instance.

    ``update`` must be called from a running event loop; it schedules the
    lookup as a task on that loop.
    """

    def __init__(
        self,
        checker: WorkspaceAvailabilityChecker,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self.checker = checker
        self.debounce_seconds = debounce_seconds
        self.status = FieldStatus.IDLE
        self.message = ""
        self.final_name = ""
        self.network_type: str | None = None
        self._generation = 0
        self._inputs: tuple[str, str | None, str | None, str | None] | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def generation(self) -> int:
        return self._generation

    def update(self, base_name: str | None, form_data: Mapping[str, Any] | None = None) -> None:
        """React to a change of the base name or of the dependent form fields."""
        base = base_name or ""
        drn = _text(form_data, "drn")
        domain = _text(form_data, "domain")
        network_type = _text(form_data, "network_type")
        inputs = (base, drn, domain, network_type)
        if inputs == self._inputs:
            return
        self._inputs = inputs

        self._cancel_pending()
        self._generation += 1
        self.network_type = network_type
        self.final_name = build_final_name(base, drn, domain)

        if network_type != DATABRICKS_NETWORK_TYPE or not self.final_name:
            self._set(FieldStatus.IDLE, "")
            return
        if len(base) < MIN_BASE_NAME_LENGTH:
            self._set(
                FieldStatus.IDLE,
                f"Final name: {self.final_name}. (Requires 3+ chars to validate)" if base else "",
            )
            return

        self._set(FieldStatus.CHECKING, f"The final name is {self.final_name}")
        self._task = asyncio.get_running_loop().create_task(
            self._debounced_check(self._generation, self.final_name)
        )

    async def wait(self) -> None:
        """Wait for the pending lookup, if any, to finish or be cancelled."""
        if self._task is not None:
            await asyncio.gather(self._task, return_exceptions=True)

    def close(self) -> None:
        """Drop any pending lookup (field unmounted)."""
        self._cancel_pending()
        self._generation += 1

    def has_error(self, raw_errors: list[str] | None = None) -> bool:
        return bool(raw_errors) or self.status in (
            FieldStatus.UNAVAILABLE,
            FieldStatus.ERROR,
        )

    def helper_text(
        self,
        raw_errors: list[str] | None = None,
        help_text: str | None = None,
        description: str | None = None,
    ) -> str:
        """Text under the field. Form validation errors take precedence."""
        if raw_errors:
            return raw_errors[0]
        if self.network_type != DATABRICKS_NETWORK_TYPE:
            return 'Validation is only active for network_type "databricks".'
        return (
            self.message
            or help_text
            or description
            or "Enter a base name to generate the final workspace name."
        )

    def _set(self, status: FieldStatus, message: str) -> None:
        self.status = status
        self.message = message

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _debounced_check(self, generation: int, final_name: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        try:
            available = await self.checker.is_available(final_name)
        except Exception as e:
            if generation != self._generation:
                return
            logger.warning("Workspace name check failed for %s: %s", final_name, e)
            self._set(
                FieldStatus.ERROR,
                f"Error validating '{final_name}': {str(e) or 'Failed to validate'}",
            )
            return
        if generation != self._generation:
            return
        if available:
            self._set(
                FieldStatus.AVAILABLE,
                f"Final name: {final_name}, and it is available.",
            )
        else:
            self._set(
                FieldStatus.UNAVAILABLE,
                f"Final name: {final_name}, but it already exists. Choose another base name",
            )


async def validate_workspace_name_on_submit(
    value: str | None,
    form_data: Mapping[str, Any] | None,
    validation: FieldValidation,
    checker: WorkspaceAvailabilityChecker,
) -> None:
    """Submit-time check. Adds an error only for a taken name or a failed lookup.

    Not applicable (no error) unless network_type is "databricks", and
    not blocking while the base name, DRN or domain is still blank.
    """
    drn = _text(form_data, "drn")
    domain = _text(form_data, "domain")
    if _text(form_data, "network_type") != DATABRICKS_NETWORK_TYPE:
        return
    if not (value or "").strip() or not (drn or "").strip() or not (domain or "").strip():
        return

    final_name = build_final_name(value, drn, domain)
    if not final_name:
        validation.add_error("Could not construct a valid final workspace name.")
        return

    try:
        available = await checker.is_available(final_name)
    except Exception as e:
        validation.add_error(str(e) or "Backend validation failed.")
        return
    if not available:
        validation.add_error(f"Workspace name '{final_name}' is not available.")
