"""
Summary cache interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ticket_inbox.domain.summary import SummaryPair


class SummaryCache(ABC):
    """
    Durable mapping of ticket ID to its SummaryPair.
    """

    @abstractmethod
    async def get(self, ticket_id: str) -> Optional[SummaryPair]:
        """Get the cached pair for a ticket, or None when absent."""
        ...

    @abstractmethod
    async def put(self, ticket_id: str, summary: SummaryPair) -> None:
        """Insert or replace the cached pair for a ticket."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Check if the backing store is reachable."""
        ...

    async def close(self) -> None:
        """Release any resources held by the cache."""
        return None
