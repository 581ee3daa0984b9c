"""DRN viewer endpoints: pending approval requests and approve/reject decisions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from devportal.api.v1.dependencies import get_drn_source
from devportal.application.interfaces import IDrnSource
from devportal.schemas.drn import (
    DrnDecisionRequest,
    DrnDecisionResponse,
    DrnDocument,
    ListPendingResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/pending", response_model=ListPendingResponse)
async def list_pending(
    drn_source: Annotated[IDrnSource, Depends(get_drn_source)],
    include_approved: Annotated[str | None, Query(alias="includeApproved")] = None,
) -> ListPendingResponse:
    """Not-approved DRNs; every DRN only when includeApproved is exactly "true"."""
    documents = await drn_source.list_documents(
        include_approved=include_approved == "true"
    )
    return ListPendingResponse(
        documents=[DrnDocument.model_validate(d) for d in documents]
    )


@router.post("/decision", response_model=DrnDecisionResponse)
async def submit_decision(body: DrnDecisionRequest) -> DrnDecisionResponse:
    """Record an approve/reject decision. Only logged until a workflow is wired."""
    logger.info("DRN decision received: %s => %s", body.drn, body.decision.value)
    return DrnDecisionResponse()
