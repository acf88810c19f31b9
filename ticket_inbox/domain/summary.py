"""
Summary and inbox domain models.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ticket_inbox.core.constants import FALLBACK_QUICK_SUMMARY
from ticket_inbox.domain.ticket import TicketRecord


class SummaryPair(BaseModel):
    """Quick and full summaries of one ticket."""

    model_config = ConfigDict(frozen=True)

    quick: str = Field(..., description="2-3 sentence actionable digest")
    full: str = Field(..., description="Structured multi-section digest")


class InboxEntry(BaseModel):
    """One ticket in the inbox listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    status: str
    priority: Optional[str] = None
    quick_summary: str = Field(..., min_length=1)
    has_comments: bool
    comment_count: int

    @classmethod
    def from_ticket(cls, ticket: TicketRecord, quick_summary: str) -> InboxEntry:
        """Project a ticket and its resolved quick summary into an entry."""
        return cls(
            id=ticket.id,
            title=ticket.title,
            status=ticket.status,
            priority=ticket.priority,
            quick_summary=quick_summary,
            has_comments=ticket.comment_count > 0,
            comment_count=ticket.comment_count,
        )


def fallback_quick_summary(ticket: TicketRecord) -> str:
    """Deterministic quick summary used when no real summary is available."""
    return FALLBACK_QUICK_SUMMARY.format(title=ticket.title)
