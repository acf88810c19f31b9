"""
Ticket domain model.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# ADF block nodes that end a line of text
_BLOCK_NODES = {"paragraph", "heading", "listItem", "codeBlock", "blockquote", "rule"}


def adf_to_text(node: Any) -> str:
    """Recursively extract plain text from an Atlassian Document Format (ADF) tree."""
    if isinstance(node, list):
        return "".join(adf_to_text(child) for child in node)
    if not isinstance(node, dict):
        return ""

    node_type = node.get("type")
    if node_type == "text":
        return node.get("text", "")
    if node_type == "hardBreak":
        return "\n"
    if node_type == "mention":
        return node.get("attrs", {}).get("text", "")

    text = adf_to_text(node.get("content", []))
    if node_type in _BLOCK_NODES:
        return text.rstrip("\n") + "\n"
    return text


def rich_text(value: Any) -> Optional[str]:
    """Normalise a Jira rich-text field (plain string or ADF document) to text."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return adf_to_text(value).strip()
    return str(value)


class TicketComment(BaseModel):
    """A comment on a ticket."""

    model_config = ConfigDict(frozen=True)

    author: str = Field(..., description="Author display name")
    body: str = Field(default="", description="Comment text")


class TicketRecord(BaseModel):
    """A ticket as read from the issue tracker."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Tracker key, e.g. DESIGN-123")
    title: str
    description: Optional[str] = None
    status: str
    priority: Optional[str] = None
    due_date: Optional[str] = None
    comments: tuple[TicketComment, ...] = ()

    @property
    def comment_count(self) -> int:
        """Number of comments on the ticket."""
        return len(self.comments)

    @classmethod
    def from_jira_issue(cls, issue: dict[str, Any]) -> TicketRecord:
        """
        Build a record from a Jira REST v3 issue payload.

        Args:
            issue: Issue object with ``key`` and ``fields``

        Returns:
            TicketRecord with rich-text fields flattened to plain text
        """
        fields = issue.get("fields") or {}
        priority = fields.get("priority") or {}
        comment_block = fields.get("comment") or {}

        comments = tuple(
            TicketComment(
                author=(c.get("author") or {}).get("displayName", "Unknown"),
                body=rich_text(c.get("body")) or "",
            )
            for c in comment_block.get("comments", [])
        )

        return cls(
            id=issue["key"],
            title=fields.get("summary") or "",
            description=rich_text(fields.get("description")) or None,
            status=(fields.get("status") or {}).get("name", ""),
            priority=priority.get("name"),
            due_date=fields.get("duedate"),
            comments=comments,
        )
