"""In-memory DRN source.

Serves a fixed set of approval requests to the DRN viewer routes and the
``drn:pending:list`` scaffolder action. Satisfies IDrnSource so a
real store can replace it without touching callers.
"""

from devportal.domain.entities import DrnEntity, filter_documents
from devportal.domain.enums import DrnState

_MOCK_DRNS: tuple[DrnEntity, ...] = (
    DrnEntity(
        drn="DRN001",
        business_unit="Finance",
        requester_email="john.doe@example.com",
        architecture_review="Pending",
        approved=False,
        state=DrnState.PENDING,
        created_at="2024-01-15",
    ),
    DrnEntity(
        drn="DRN002",
        business_unit="Engineering",
        requester_email="jane.smith@example.com",
        architecture_review="completed",
        approved=True,
        state=DrnState.APPROVED,
        created_at="2025-06-12",
    ),
    DrnEntity(
        drn="DRN003",
        business_unit="Itsvc",
        requester_email="chris.w@example.com",
        architecture_review="In Progress",
        approved=False,
        state=DrnState.REJECTED,
        created_at="2024-08-12",
    ),
    DrnEntity(
        drn="DRN004",
        business_unit="Cloud",
        requester_email="andy.q@example.com",
        architecture_review="In Progress",
        approved=False,
        state=DrnState.PENDING,
        created_at="2025-03-19",
    ),
    DrnEntity(
        drn="DRN005",
        business_unit="Engineering",
        requester_email="mike.m@example.com",
        architecture_review="completed",
        approved=True,
        state=DrnState.APPROVED,
        created_at="2025-11-11",
    ),
)


class MockDrnSource:
    """Read-only DRN source backed by a static tuple."""

    def __init__(self, records: tuple[DrnEntity, ...] | list[DrnEntity] = _MOCK_DRNS) -> None:
        self._records = list(records)

    async def list_documents(self, include_approved: bool = False) -> list[DrnEntity]:
        return filter_documents(self._records, include_approved=include_approved)
