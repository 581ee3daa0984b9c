"""Client for the DRN viewer backend routes (/pending, /decision)."""

from __future__ import annotations

import httpx

from devportal.domain.enums import DrnDecision
from devportal.domain.exceptions import DrnViewerClientError
from devportal.schemas.drn import DrnDecisionRequest, ListPendingResponse


class DrnViewerClient:
    """Lists DRNs and submits reviewer decisions over HTTP."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http_client

    async def list_pending(self, include_approved: bool = False) -> ListPendingResponse:
        """Fetch pending DRNs (or every DRN when include_approved)."""
        response = await self._http.get(
            f"{self.base_url}/pending",
            params={"includeApproved": "true" if include_approved else "false"},
        )
        if not response.is_success:
            raise DrnViewerClientError(
                f"Failed to fetch DRNs: {response.status_code}", response.status_code
            )
        return ListPendingResponse.model_validate(response.json())

    async def decide(self, drn: str, decision: DrnDecision | str) -> None:
        """Submit an approve/reject decision for drn."""
        body = DrnDecisionRequest(drn=drn, decision=DrnDecision(decision))
        response = await self._http.post(
            f"{self.base_url}/decision",
            json=body.model_dump(mode="json"),
        )
        if not response.is_success:
            raise DrnViewerClientError(
                f"Failed decision submit: {response.status_code}", response.status_code
            )
