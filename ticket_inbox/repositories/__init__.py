"""
Repository implementations for data access.
"""

from ticket_inbox.repositories.base import SummaryCache
from ticket_inbox.repositories.summary_cache import InMemorySummaryCache, SqlSummaryCache

__all__ = [
    "SummaryCache",
    "InMemorySummaryCache",
    "SqlSummaryCache",
]
