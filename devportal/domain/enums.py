"""Domain enumerations for DRN review."""

from enum import Enum


class DrnState(str, Enum):
    """Review state of a DRN approval request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid state values as strings."""
        return [state.value for state in cls]


class DrnDecision(str, Enum):
    """Reviewer decision submitted for a DRN."""

    APPROVE = "approve"
    REJECT = "reject"
