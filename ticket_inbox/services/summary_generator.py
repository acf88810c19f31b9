"""
Ticket summary generation with the Anthropic Messages API.
"""

import re
from typing import Any, Optional

import anthropic

from ticket_inbox.core.constants import (
    FULL_SUMMARY_FAILED,
    FULL_SUMMARY_MARKER,
    QUICK_SUMMARY_FAILED,
    QUICK_SUMMARY_MARKER,
)
from ticket_inbox.core.exceptions import GenerationFailed
from ticket_inbox.core.logging import get_logger
from ticket_inbox.domain.summary import SummaryPair
from ticket_inbox.domain.ticket import TicketRecord
from ticket_inbox.prompts.summary import build_summary_prompt

logger = get_logger(__name__)

_QUICK_PATTERN = re.compile(
    rf"{re.escape(QUICK_SUMMARY_MARKER)}\s*(.*?)(?=\s*{re.escape(FULL_SUMMARY_MARKER)}|\Z)",
    re.DOTALL,
)
_FULL_PATTERN = re.compile(rf"{re.escape(FULL_SUMMARY_MARKER)}\s*(.*)\Z", re.DOTALL)


def parse_summaries(text: str) -> SummaryPair:
    """
    Split model output into quick and full summaries.

    The quick summary runs from the QUICK marker to the FULL marker (or end of
    text); the full summary runs from the FULL marker to end of text. A missing
    marker or an empty section yields the fixed failure string for that field.

    Args:
        text: Raw model output

    Returns:
        SummaryPair, never with an empty field
    """
    quick_match = _QUICK_PATTERN.search(text)
    full_match = _FULL_PATTERN.search(text)

    quick = quick_match.group(1).strip() if quick_match else ""
    full = full_match.group(1).strip() if full_match else ""

    return SummaryPair(
        quick=quick or QUICK_SUMMARY_FAILED,
        full=full or FULL_SUMMARY_FAILED,
    )


class SummaryGenerator:
    """
    Produces a SummaryPair for a ticket from a single model call.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 2000,
        timeout: float = 60.0,
        client: Optional[Any] = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            api_key: Anthropic API key
            model: Model identifier
            max_tokens: Max tokens per response
            timeout: Request timeout in seconds
            client: Pre-built async client exposing ``messages.create`` (used by tests)
        """
        self.model = model
        self.max_tokens = max_tokens
        # SDK retries disabled: one attempt per ticket
        self.client = client or anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
        )

    async def summarize(self, ticket: TicketRecord) -> SummaryPair:
        """
        Generate quick and full summaries for a ticket.

        Args:
            ticket: Ticket to summarize

        Returns:
            Parsed SummaryPair

        Raises:
            GenerationFailed: If the API call fails or returns non-text content
        """
        prompt = build_summary_prompt(ticket)

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            raise GenerationFailed(str(e), details={"ticket_id": ticket.id}) from e

        if not response.content:
            raise GenerationFailed("Empty response from Claude API", details={"ticket_id": ticket.id})

        block = response.content[0]
        if block.type != "text":
            raise GenerationFailed(
                "Unexpected response type from Claude API",
                details={"ticket_id": ticket.id, "content_type": block.type},
            )

        summary = parse_summaries(block.text)
        logger.debug("Summary generated", ticket_id=ticket.id, quick_length=len(summary.quick))
        return summary

    async def close(self) -> None:
        """Close the underlying API client."""
        close = getattr(self.client, "close", None)
        if close is not None:
            await close()
