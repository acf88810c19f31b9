"""
Inbox and summary endpoints.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ticket_inbox.api.deps import get_inbox_assembler
from ticket_inbox.domain.summary import InboxEntry
from ticket_inbox.services.inbox_service import InboxAssembler

router = APIRouter()


# Response models
class InboxResponse(BaseModel):
    """Response for the inbox listing."""

    tickets: list[InboxEntry]


class FullSummaryResponse(BaseModel):
    """Response for one ticket's full summary."""

    id: str
    full: str


@router.get(
    "/inbox",
    response_model=InboxResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def get_inbox(
    assembler: InboxAssembler = Depends(get_inbox_assembler),
) -> InboxResponse:
    """
    Assigned tickets with quick summaries.

    Tickets whose summary cannot be produced carry a fallback summary; the
    request only fails when the tracker is unreachable.
    """
    entries = await assembler.build_inbox()
    return InboxResponse(tickets=entries)


@router.get("/summary/{ticket_id}", response_model=FullSummaryResponse)
async def get_full_summary(
    ticket_id: str,
    assembler: InboxAssembler = Depends(get_inbox_assembler),
) -> FullSummaryResponse:
    """
    Full summary for one ticket, generated on demand if not cached yet.
    """
    full = await assembler.get_full_summary(ticket_id)
    return FullSummaryResponse(id=ticket_id, full=full)
