"""``drn:pending:list`` scaffolder action.

Lists DRN approval requests for a template step. By default only
requests that are not yet approved are returned; each one carries a link
that opens the approval template pre-filled with its DRN.
"""

from __future__ import annotations

from typing import Literal
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from devportal.application.interfaces import IDrnSource
from devportal.domain.entities import DrnEntity
from devportal.domain.enums import DrnState
from devportal.scaffolder.registry import ActionContext, ActionExample, TemplateAction

ACTION_ID = "drn:pending:list"

EXAMPLES = (
    ActionExample(
        description="List pending DRN documents",
        example="""\
steps:
  - id: list-drns
    action: drn:pending:list
    name: List pending DRNs
""",
    ),
    ActionExample(
        description="List every DRN document, approved ones included",
        example="""\
steps:
  - id: list-drns
    action: drn:pending:list
    name: List all DRNs
    input:
      includeApproved: true
""",
    ),
)


class DrnPendingListInput(BaseModel):
    """Action input. Omitted input means pending documents only."""

    model_config = ConfigDict(populate_by_name=True)

    include_approved: bool = Field(default=False, alias="includeApproved")


class DrnActionDocument(BaseModel):
    """A DRN as emitted in the ``documents`` output."""

    drn: str
    business_unit: str
    requester_email: str
    architecture_review: str
    approved: bool
    state: DrnState
    created_at: str | None = None
    approve_url: str | None = None


class DrnPendingListOutput(BaseModel):
    """Action outputs."""

    documents: list[DrnActionDocument] = Field(
        ..., description="DRN documents from the collection"
    )
    status: Literal["SUCCESS", "FAILED"] = Field(
        ..., description="The status of the action"
    )


def build_approve_url(app_base_url: str, approval_template_path: str, drn: str) -> str | None:
    """Return the approval template link for drn, or None when links are not configured."""
    if not app_base_url or not approval_template_path:
        return None
    return f"{app_base_url.rstrip('/')}{approval_template_path}?drn={quote(drn, safe='')}"


def create_drn_pending_list_action(
    drn_source: IDrnSource,
    app_base_url: str = "",
    approval_template_path: str = "",
) -> TemplateAction:
    """Build the ``drn:pending:list`` action bound to a DRN source."""

    def to_document(entity: DrnEntity) -> dict:
        data = entity.to_dict()
        data["approve_url"] = build_approve_url(
            app_base_url, approval_template_path, entity.drn
        )
        return data

    async def handler(ctx: ActionContext) -> None:
        ctx.logger.info("Fetching pending DRN documents.")
        include_approved = (
            ctx.input.include_approved
            if isinstance(ctx.input, DrnPendingListInput)
            else False
        )
        try:
            entities = await drn_source.list_documents(include_approved=include_approved)
            documents = [to_document(e) for e in entities]
        except Exception:
            ctx.logger.exception("Failed to fetch DRN documents")
            ctx.output("status", "FAILED")
            raise
        ctx.logger.info(
            "Fetched and processed %d DRN documents successfully.", len(documents)
        )
        ctx.output("documents", documents)
        ctx.output("status", "SUCCESS")

    return TemplateAction(
        id=ACTION_ID,
        description="Lists pending DRN documents",
        handler=handler,
        input_model=DrnPendingListInput,
        output_model=DrnPendingListOutput,
        examples=EXAMPLES,
    )
