"""
Ticket Inbox: assigned Jira tickets with AI-generated summaries.
"""

__version__ = "1.0.0"
