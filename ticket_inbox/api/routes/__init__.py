"""
API routers.
"""

from ticket_inbox.api.routes import health, inbox

__all__ = ["health", "inbox"]
