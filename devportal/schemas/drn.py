"""DRN viewer API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from devportal.domain.enums import DrnDecision, DrnState


class DrnDocument(BaseModel):
    """A DRN approval request as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    drn: str
    business_unit: str
    requester_email: str
    architecture_review: str
    approved: bool
    state: DrnState
    created_at: str | None = None


class ListPendingResponse(BaseModel):
    """Response for GET /pending."""

    documents: list[DrnDocument] = Field(default_factory=list)


class DrnDecisionRequest(BaseModel):
    """Body of POST /decision."""

    drn: str = Field(..., min_length=1)
    decision: DrnDecision


class DrnDecisionResponse(BaseModel):
    """Response for POST /decision."""

    ok: bool = True
