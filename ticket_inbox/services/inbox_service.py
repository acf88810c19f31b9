"""
Inbox assembly: assigned tickets plus cached or freshly generated summaries.
"""

import asyncio
from typing import Protocol

from ticket_inbox.core.exceptions import CacheUnavailable, GenerationFailed
from ticket_inbox.core.logging import get_logger
from ticket_inbox.domain.summary import InboxEntry, SummaryPair, fallback_quick_summary
from ticket_inbox.domain.ticket import TicketRecord
from ticket_inbox.repositories.base import SummaryCache

logger = get_logger(__name__)


class TicketSource(Protocol):
    """Read-only source of assigned tickets."""

    async def fetch_assigned(self) -> list[TicketRecord]: ...

    async def get_ticket(self, ticket_id: str) -> TicketRecord: ...


class Summarizer(Protocol):
    """Turns one ticket into a SummaryPair."""

    async def summarize(self, ticket: TicketRecord) -> SummaryPair: ...


class InboxAssembler:
    """
    Builds the inbox listing with cache-or-generate summaries.

    Each ticket is resolved independently and concurrently; a failure while
    summarizing one ticket degrades that ticket to the fallback summary and
    never affects the others.
    """

    def __init__(
        self,
        ticket_source: TicketSource,
        summarizer: Summarizer,
        cache: SummaryCache,
    ) -> None:
        """
        Initialize the assembler.

        Args:
            ticket_source: Issue tracker adapter
            summarizer: Summary generator
            cache: Summary cache keyed by ticket ID
        """
        self.ticket_source = ticket_source
        self.summarizer = summarizer
        self.cache = cache

    async def build_inbox(self) -> list[InboxEntry]:
        """
        Build one inbox entry per assigned ticket, in tracker order.

        Raises:
            UpstreamUnavailable: If the tracker cannot be reached
        """
        tickets = await self.ticket_source.fetch_assigned()

        quick_summaries = await asyncio.gather(
            *(self._resolve_quick_summary(ticket) for ticket in tickets)
        )

        entries = [
            InboxEntry.from_ticket(ticket, quick)
            for ticket, quick in zip(tickets, quick_summaries)
        ]
        logger.info("Inbox built", ticket_count=len(entries))
        return entries

    async def _resolve_quick_summary(self, ticket: TicketRecord) -> str:
        """Cache lookup, then generate and write through on a miss."""
        try:
            cached = await self.cache.get(ticket.id)
            if cached is not None and cached.quick:
                logger.debug("Summary cache hit", ticket_id=ticket.id)
                return cached.quick

            summary = await self.summarizer.summarize(ticket)
            await self.cache.put(ticket.id, summary)
            return summary.quick

        except (GenerationFailed, CacheUnavailable) as e:
            logger.warning(
                "Failed to generate summary, using fallback",
                ticket_id=ticket.id,
                error=e.message,
                error_code=e.code,
            )
            return fallback_quick_summary(ticket)

        except Exception:
            logger.exception("Unexpected error while summarizing, using fallback", ticket_id=ticket.id)
            return fallback_quick_summary(ticket)

    async def get_full_summary(self, ticket_id: str) -> str:
        """
        Full summary for one ticket, generating and caching it on a miss.

        Args:
            ticket_id: Ticket key

        Raises:
            TicketNotFound: If the tracker has no such ticket
            UpstreamUnavailable: If the tracker cannot be reached
            GenerationFailed: If the summary cannot be generated
            CacheUnavailable: If the cache cannot be read or written
        """
        cached = await self.cache.get(ticket_id)
        if cached is not None:
            return cached.full

        ticket = await self.ticket_source.get_ticket(ticket_id)
        summary = await self.summarizer.summarize(ticket)
        await self.cache.put(ticket.id, summary)

        logger.info("Full summary generated on demand", ticket_id=ticket_id)
        return summary.full
