"""
Jira issue tracker integration.
"""

from ticket_inbox.jira.client import JiraClient, build_assigned_jql

__all__ = ["JiraClient", "build_assigned_jql"]
