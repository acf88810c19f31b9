"""
Service layer implementations.
"""

from ticket_inbox.services.inbox_service import InboxAssembler
from ticket_inbox.services.summary_generator import SummaryGenerator, parse_summaries

__all__ = [
    "InboxAssembler",
    "SummaryGenerator",
    "parse_summaries",
]
