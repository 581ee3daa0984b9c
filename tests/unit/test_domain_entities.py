"""DrnEntity, DRN enums and pending filtering."""

import pytest

from devportal.domain import DrnDecision, DrnEntity, DrnState, ValidationException, filter_documents


def _drn(drn: str, approved: bool, state: DrnState = DrnState.PENDING) -> DrnEntity:
    return DrnEntity(
        drn=drn,
        business_unit="Finance",
        requester_email="someone@example.com",
        architecture_review="Pending",
        approved=approved,
        state=state,
    )


def test_drn_required() -> None:
    with pytest.raises(ValidationException) as exc_info:
        _drn("  ", approved=False)
    assert exc_info.value.details == {"field": "drn"}


def test_to_dict_uses_state_value() -> None:
    data = _drn("DRN009", approved=True, state=DrnState.APPROVED).to_dict()
    assert data["state"] == "approved"
    assert data["created_at"] is None


def test_filter_documents_excludes_approved_by_default() -> None:
    docs = [_drn("A", False), _drn("B", True, DrnState.APPROVED), _drn("C", False, DrnState.REJECTED)]

    assert [d.drn for d in filter_documents(docs)] == ["A", "C"]
    assert [d.drn for d in filter_documents(docs, include_approved=True)] == ["A", "B", "C"]


def test_enum_values() -> None:
    assert DrnState.values() == ["pending", "approved", "rejected"]
    assert DrnDecision("reject") is DrnDecision.REJECT
