"""
Custom exception hierarchy for the Ticket Inbox service.
Provides structured error handling with proper HTTP status codes.
"""

from typing import Any, Optional


class TicketInboxError(Exception):
    """Base exception for all Ticket Inbox errors."""

    label = "Internal Server Error"

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        body: dict[str, Any] = {
            "error": self.label,
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            body["details"] = self.details
        return body


# =============================================================================
# Configuration Errors (500)
# =============================================================================


class ConfigurationMissing(TicketInboxError):
    """Required configuration is not set."""

    label = "Configuration Missing"

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            message=f"Missing required configuration: {', '.join(missing)}",
            code="CONFIGURATION_MISSING",
            details={"missing": missing},
            status_code=500,
        )
        self.missing = missing


# =============================================================================
# Authorization Errors (403)
# =============================================================================


class OriginNotAllowed(TicketInboxError):
    """Cross-origin request from an origin outside the allow list."""

    label = "CORS Error"

    def __init__(self, origin: str) -> None:
        super().__init__(
            message="Origin not allowed",
            code="ORIGIN_NOT_ALLOWED",
            details={"origin": origin},
            status_code=403,
        )


# =============================================================================
# Not Found Errors (404)
# =============================================================================


class TicketNotFound(TicketInboxError):
    """Ticket does not exist in the tracker."""

    label = "Not Found"

    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            message=f"Ticket {ticket_id} not found",
            code="TICKET_NOT_FOUND",
            details={"ticket_id": ticket_id},
            status_code=404,
        )


# =============================================================================
# External Service Errors
# =============================================================================


class UpstreamUnavailable(TicketInboxError):
    """Issue tracker unreachable or rejected the request."""

    label = "Failed to fetch inbox tickets"

    def __init__(
        self,
        message: str,
        upstream_status: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            code="UPSTREAM_UNAVAILABLE",
            details={"upstream_status": upstream_status, **(details or {})},
            status_code=500,
        )
        self.upstream_status = upstream_status


class GenerationFailed(TicketInboxError):
    """Language model call failed or returned an unusable response."""

    label = "Summary Generation Failed"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            message=f"Failed to generate ticket summary: {message}",
            code="GENERATION_FAILED",
            details=details,
            status_code=502,
        )


class CacheUnavailable(TicketInboxError):
    """Summary cache store unreachable or rejected an operation."""

    label = "Summary Cache Unavailable"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            message=message,
            code="CACHE_UNAVAILABLE",
            details=details,
            status_code=502,
        )
