"""
Summary cache repositories.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from ticket_inbox.core.exceptions import CacheUnavailable
from ticket_inbox.core.logging import get_logger
from ticket_inbox.database.models import TicketSummaryDB
from ticket_inbox.database.session import Database
from ticket_inbox.domain.summary import SummaryPair
from ticket_inbox.repositories.base import SummaryCache

logger = get_logger(__name__)

T = TypeVar("T")

_UPSERT_BUILDERS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class InMemorySummaryCache(SummaryCache):
    """
    In-memory summary cache for development/testing.
    """

    def __init__(self) -> None:
        self._summaries: dict[str, SummaryPair] = {}

    async def get(self, ticket_id: str) -> Optional[SummaryPair]:
        """Get the cached pair for a ticket."""
        return self._summaries.get(ticket_id)

    async def put(self, ticket_id: str, summary: SummaryPair) -> None:
        """Insert or replace the cached pair for a ticket."""
        self._summaries[ticket_id] = summary
        logger.debug("Summary cached", ticket_id=ticket_id)

    async def ping(self) -> bool:
        """Always reachable."""
        return True

    def __len__(self) -> int:
        return len(self._summaries)


class SqlSummaryCache(SummaryCache):
    """
    Summary cache stored in the ``ticket_summaries`` table.
    """

    def __init__(self, database: Database, timeout: float = 10.0) -> None:
        """
        Initialize with a database handle.

        Args:
            database: Engine and session owner
            timeout: Per-operation timeout in seconds
        """
        self.database = database
        self.timeout = timeout

        if database.dialect not in _UPSERT_BUILDERS:
            raise ValueError(f"Unsupported database dialect for summary cache: {database.dialect}")
        self._insert = _UPSERT_BUILDERS[database.dialect]

    async def _bounded(self, operation: str, ticket_id: str, awaitable: Awaitable[T]) -> T:
        """Run a store operation under the timeout, mapping failures to CacheUnavailable."""
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise CacheUnavailable(
                f"Summary cache {operation} timed out after {self.timeout}s",
                details={"ticket_id": ticket_id},
            ) from e
        except (SQLAlchemyError, OSError) as e:
            raise CacheUnavailable(
                f"Failed to {operation} summary cache: {e}",
                details={"ticket_id": ticket_id},
            ) from e

    async def get(self, ticket_id: str) -> Optional[SummaryPair]:
        """Get the cached pair for a ticket."""
        return await self._bounded("read", ticket_id, self._get(ticket_id))

    async def _get(self, ticket_id: str) -> Optional[SummaryPair]:
        async with self.database.session() as session:
            result = await session.execute(
                select(TicketSummaryDB.summary_text, TicketSummaryDB.full_summary).where(
                    TicketSummaryDB.jira_ticket_id == ticket_id
                )
            )
            row = result.one_or_none()

        if row is None:
            return None
        return SummaryPair(quick=row.summary_text, full=row.full_summary)

    async def put(self, ticket_id: str, summary: SummaryPair) -> None:
        """Insert or replace the cached pair for a ticket in one statement."""
        await self._bounded("save", ticket_id, self._put(ticket_id, summary))
        logger.debug("Summary cached", ticket_id=ticket_id)

    async def _put(self, ticket_id: str, summary: SummaryPair) -> None:
        stmt = self._insert(TicketSummaryDB).values(
            jira_ticket_id=ticket_id,
            summary_text=summary.quick,
            full_summary=summary.full,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[TicketSummaryDB.jira_ticket_id],
            set_={
                "summary_text": stmt.excluded.summary_text,
                "full_summary": stmt.excluded.full_summary,
                "updated_at": func.now(),
            },
        )
        async with self.database.session() as session:
            await session.execute(stmt)

    async def ping(self) -> bool:
        """Check if the database answers."""
        try:
            await asyncio.wait_for(self.database.ping(), timeout=self.timeout)
            return True
        except (asyncio.TimeoutError, SQLAlchemyError, OSError) as e:
            logger.warning("Summary cache unreachable", error=str(e))
            return False

    async def close(self) -> None:
        """Dispose of the engine."""
        await self.database.dispose()
