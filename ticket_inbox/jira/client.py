"""
Jira Cloud REST API v3 client.
Reads assigned tickets for the inbox; never writes to the tracker.
"""

from typing import Any, Optional

import httpx

from ticket_inbox.core.constants import (
    JIRA_API_PATH,
    JIRA_TICKET_FIELDS,
    MAX_TICKETS,
    OPEN_WORK_STATUSES,
)
from ticket_inbox.core.exceptions import TicketNotFound, UpstreamUnavailable
from ticket_inbox.core.logging import get_logger
from ticket_inbox.domain.ticket import TicketRecord

logger = get_logger(__name__)


def build_assigned_jql(user_id: Optional[str] = None) -> str:
    """JQL selecting open-work tickets assigned to a user (default: the caller)."""
    assignee = user_id if user_id else "currentUser()"
    statuses = ", ".join(f'"{status}"' for status in OPEN_WORK_STATUSES)
    return f"assignee = {assignee} AND status IN ({statuses})"


class JiraClient:
    """
    Read-only client for the Jira issue tracker.
    Single best-effort call per operation, no retries.
    """

    def __init__(
        self,
        base_url: str,
        email: str,
        api_token: str,
        timeout: float = 15.0,
        max_results: int = MAX_TICKETS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize the Jira client.

        Args:
            base_url: Jira site URL, e.g. https://your-domain.atlassian.net
            email: Account email for Basic auth
            api_token: API token for Basic auth
            timeout: Request timeout in seconds
            max_results: Max tickets per search, capped at 50
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.email = email
        self.api_token = api_token
        self.timeout = timeout
        self.max_results = min(max_results, MAX_TICKETS)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=f"{self.base_url}{JIRA_API_PATH}",
                auth=(self.email, self.api_token),
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Make a GET request against the Jira API.

        Raises:
            UpstreamUnavailable: On network failure or a non-2xx response
        """
        client = await self._get_client()

        try:
            response = await client.get(endpoint, params=params)
            response.raise_for_status()
            return response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(
                "Jira request failed",
                endpoint=endpoint,
                status_code=status,
                response_text=e.response.text[:500],
            )
            raise UpstreamUnavailable(
                message=f"Jira returned HTTP {status} {e.response.reason_phrase}",
                upstream_status=status,
                details={"endpoint": endpoint},
            ) from e

        except httpx.RequestError as e:
            logger.error("Jira request error", endpoint=endpoint, error=str(e))
            raise UpstreamUnavailable(
                message=f"Jira request failed: {e}",
                details={"endpoint": endpoint},
            ) from e

        except ValueError as e:
            raise UpstreamUnavailable(
                message="Jira returned a non-JSON response",
                details={"endpoint": endpoint},
            ) from e

    async def fetch_assigned(self, user_id: Optional[str] = None) -> list[TicketRecord]:
        """
        Fetch open-work tickets assigned to a user.

        Args:
            user_id: Jira account ID; defaults to the authenticated account

        Returns:
            Up to ``max_results`` tickets, in the order Jira returns them

        Raises:
            UpstreamUnavailable: If Jira cannot be reached or rejects the call
        """
        params = {
            "jql": build_assigned_jql(user_id),
            "fields": ",".join(JIRA_TICKET_FIELDS),
            "maxResults": self.max_results,
        }
        data = await self._get("/search", params=params)

        issues = data.get("issues") or []
        tickets = [self._to_record(issue) for issue in issues[: self.max_results]]

        logger.info("Fetched assigned tickets", count=len(tickets))
        return tickets

    async def get_ticket(self, ticket_id: str) -> TicketRecord:
        """
        Fetch a single ticket by key.

        Args:
            ticket_id: Ticket key, e.g. DESIGN-123

        Raises:
            TicketNotFound: If Jira answers 404
            UpstreamUnavailable: On any other failure
        """
        try:
            data = await self._get(
                f"/issue/{ticket_id}",
                params={"fields": ",".join(JIRA_TICKET_FIELDS)},
            )
        except UpstreamUnavailable as e:
            if e.upstream_status == 404:
                raise TicketNotFound(ticket_id) from e
            raise

        return self._to_record(data)

    @staticmethod
    def _to_record(issue: Any) -> TicketRecord:
        """Build a ticket from an issue payload, rejecting malformed ones as upstream failures."""
        try:
            return TicketRecord.from_jira_issue(issue)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            logger.error("Malformed Jira issue payload", error=str(e))
            raise UpstreamUnavailable(
                message=f"Jira returned a malformed issue: {e!r}",
                details={"issue_key": issue.get("key") if isinstance(issue, dict) else None},
            ) from e

    async def __aenter__(self) -> "JiraClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
