"""
Request origin checks and request identifiers.
"""

import secrets
from typing import Optional

from ticket_inbox.core.exceptions import OriginNotAllowed


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracing.

    Returns:
        A random 8-byte hex string prefixed with 'req_'
    """
    return f"req_{secrets.token_hex(8)}"


def check_origin(origin: Optional[str], allowed_origins: list[str]) -> None:
    """
    Reject cross-origin requests from origins outside the allow list.

    Requests without an Origin header (curl, server-to-server) are allowed.

    Args:
        origin: Value of the request's Origin header
        allowed_origins: Exact origins that may call the API

    Raises:
        OriginNotAllowed: If the origin is present and not allowed
    """
    if not origin:
        return
    if origin not in allowed_origins:
        raise OriginNotAllowed(origin)
