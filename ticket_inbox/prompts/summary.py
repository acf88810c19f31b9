"""
Summary prompt template for ticket digests.
"""

from ticket_inbox.core.constants import (
    FULL_SUMMARY_MARKER,
    NO_COMMENTS,
    NO_DESCRIPTION,
    NO_DUE_DATE,
    NO_PRIORITY,
    QUICK_SUMMARY_MARKER,
)
from ticket_inbox.domain.ticket import TicketRecord

SUMMARY_PROMPT = """You are analyzing a Jira ticket for a design team. Generate TWO summaries:

TICKET: {key}
TITLE: {title}
DESCRIPTION: {description}
PRIORITY: {priority}
DUE DATE: {due_date}
COMMENTS:
{comments}

Please provide your response in the following EXACT format:

{quick_marker}
[2-3 sentences describing what needs to be built. Be concise and actionable.]

{full_marker}
🎯 WHAT TO BUILD
[Detailed description of what needs to be designed/built]

⚠️ KEY CONSTRAINTS
[Important limitations, requirements, or constraints to consider]

📋 WHY THIS MATTERS
[Context about why this ticket is important and its impact]

Focus on actionable design information that will help a designer understand what to create."""


def render_comments(ticket: TicketRecord) -> str:
    """Flatten comments to one ``- author: body`` line each."""
    if not ticket.comments:
        return NO_COMMENTS
    return "\n".join(f"- {comment.author}: {comment.body}" for comment in ticket.comments)


def build_summary_prompt(ticket: TicketRecord) -> str:
    """Render the summary prompt for one ticket."""
    return SUMMARY_PROMPT.format(
        key=ticket.id,
        title=ticket.title,
        description=ticket.description or NO_DESCRIPTION,
        priority=ticket.priority or NO_PRIORITY,
        due_date=ticket.due_date or NO_DUE_DATE,
        comments=render_comments(ticket),
        quick_marker=QUICK_SUMMARY_MARKER,
        full_marker=FULL_SUMMARY_MARKER,
    )
