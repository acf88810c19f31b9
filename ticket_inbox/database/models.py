"""SQLAlchemy database models for the summary cache."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ticket_inbox.core.constants import SUMMARY_TABLE


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class TicketSummaryDB(Base):
    """Cached summaries for one ticket.

    One row per ticket key; regeneration overwrites the row.
    """
    __tablename__ = SUMMARY_TABLE

    jira_ticket_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    summary_text: Mapped[str] = mapped_column(Text, nullable=False)
    full_summary: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<TicketSummaryDB {self.jira_ticket_id}>"
