"""DRN domain entity.

A DRN is an approval request record (business unit, requester, review
status). Records come from a read-only source; the entity only exposes
the filtering rules routes and scaffolder actions share.
"""

from dataclasses import asdict, dataclass
from typing import Any

from devportal.domain.enums import DrnState
from devportal.domain.exceptions import ValidationException


@dataclass(frozen=True)
class DrnEntity:
    """Approval request record."""

    drn: str
    business_unit: str
    requester_email: str
    architecture_review: str
    approved: bool
    state: DrnState
    created_at: str | None = None

    def __post_init__(self) -> None:
        if not self.drn or not self.drn.strip():
            raise ValidationException("DRN identifier is required", field="drn")

    @property
    def is_pending(self) -> bool:
        """True while the request has not been approved."""
        return not self.approved

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with the state as its string value."""
        data = asdict(self)
        data["state"] = self.state.value
        return data


def filter_documents(
    documents: list[DrnEntity], include_approved: bool = False
) -> list[DrnEntity]:
    """Return all documents, or only pending ones unless include_approved."""
    if include_approved:
        return list(documents)
    return [doc for doc in documents if doc.is_pending]
