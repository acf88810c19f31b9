"""
Pytest configuration and fixtures.
"""

from typing import Any, AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from ticket_inbox.api.deps import get_cache, get_inbox_assembler
from ticket_inbox.domain.summary import SummaryPair
from ticket_inbox.domain.ticket import TicketComment, TicketRecord
from ticket_inbox.main import app
from ticket_inbox.repositories.summary_cache import InMemorySummaryCache
from ticket_inbox.services.inbox_service import InboxAssembler


def make_ticket(
    ticket_id: str,
    title: str = "Untitled",
    comments: int = 0,
    **fields: Any,
) -> TicketRecord:
    """Build a ticket with ``comments`` generated comments."""
    return TicketRecord(
        id=ticket_id,
        title=title,
        status=fields.pop("status", "To Do"),
        comments=tuple(
            TicketComment(author=f"Reviewer {i}", body=f"Comment {i}") for i in range(comments)
        ),
        **fields,
    )


@pytest.fixture
def ticket_factory() -> Any:
    """Factory for tickets with generated comments."""
    return make_ticket


@pytest.fixture
def ticket_a() -> TicketRecord:
    """Ticket with a priority and two comments."""
    return make_ticket("DESIGN-1", title="Checkout redesign", comments=2, priority="High")


@pytest.fixture
def ticket_b() -> TicketRecord:
    """Ticket without priority or comments."""
    return make_ticket("DESIGN-2", title="Empty state illustrations", status="In Progress")


@pytest.fixture
def sample_jira_issue() -> dict[str, Any]:
    """Jira REST v3 issue payload with ADF description and comments."""
    return {
        "id": "10001",
        "key": "DESIGN-123",
        "fields": {
            "summary": "Onboarding flow",
            "description": {
                "type": "doc",
                "version": 1,
                "content": [
                    {
                        "type": "paragraph",
                        "content": [
                            {"type": "text", "text": "Design the "},
                            {"type": "text", "text": "first-run", "marks": [{"type": "strong"}]},
                            {"type": "text", "text": " experience."},
                        ],
                    },
                    {
                        "type": "paragraph",
                        "content": [{"type": "text", "text": "Mobile first."}],
                    },
                ],
            },
            "status": {"name": "In Progress"},
            "priority": {"name": "High"},
            "duedate": "2026-11-01",
            "comment": {
                "comments": [
                    {
                        "id": "1",
                        "author": {"displayName": "Ana", "emailAddress": "ana@example.com"},
                        "body": {
                            "type": "doc",
                            "version": 1,
                            "content": [
                                {"type": "paragraph", "content": [{"type": "text", "text": "Use the new palette"}]}
                            ],
                        },
                        "created": "2026-10-01T10:00:00.000+0000",
                    }
                ]
            },
        },
    }


@pytest.fixture
def cache() -> InMemorySummaryCache:
    """Empty in-memory summary cache."""
    return InMemorySummaryCache()


@pytest.fixture
def ticket_source(ticket_a: TicketRecord, ticket_b: TicketRecord) -> AsyncMock:
    """Ticket source returning ticket_a then ticket_b."""
    source = AsyncMock()
    source.fetch_assigned.return_value = [ticket_a, ticket_b]
    source.get_ticket.return_value = ticket_b
    return source


@pytest.fixture
def summarizer() -> AsyncMock:
    """Summarizer echoing the ticket ID in both summaries."""
    mock = AsyncMock()

    async def summarize(ticket: TicketRecord) -> SummaryPair:
        return SummaryPair(quick=f"{ticket.id} quick", full=f"{ticket.id} full")

    mock.summarize.side_effect = summarize
    return mock


@pytest.fixture
def assembler(
    ticket_source: AsyncMock,
    summarizer: AsyncMock,
    cache: InMemorySummaryCache,
) -> InboxAssembler:
    """Assembler wired to mocks and an in-memory cache."""
    return InboxAssembler(ticket_source=ticket_source, summarizer=summarizer, cache=cache)


@pytest.fixture
async def async_client(
    assembler: InboxAssembler,
    cache: InMemorySummaryCache,
) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for testing, with services overridden."""
    app.dependency_overrides[get_inbox_assembler] = lambda: assembler
    app.dependency_overrides[get_cache] = lambda: cache
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
