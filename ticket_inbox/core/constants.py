"""
System-wide constants for the Ticket Inbox service.
"""

# =============================================================================
# API Constants
# =============================================================================

API_PREFIX = "/api"

# =============================================================================
# Jira Constants
# =============================================================================

JIRA_API_PATH = "/rest/api/3"

# Fields requested for every ticket
JIRA_TICKET_FIELDS = ["summary", "description", "status", "priority", "duedate", "comment"]

# Statuses that count as open work
OPEN_WORK_STATUSES = ("To Do", "In Progress")

# Upper bound on tickets per listing
MAX_TICKETS = 50

# =============================================================================
# Summary Constants
# =============================================================================

QUICK_SUMMARY_MARKER = "===QUICK SUMMARY==="
FULL_SUMMARY_MARKER = "===FULL SUMMARY==="

QUICK_SUMMARY_FAILED = "Summary generation failed. Please review the ticket manually."
FULL_SUMMARY_FAILED = "Full summary generation failed. Please review the ticket manually."

# Substituted when a ticket's summary cannot be obtained at all
FALLBACK_QUICK_SUMMARY = "Design and implement: {title}"

# Prompt placeholders for missing ticket fields
NO_DESCRIPTION = "No description provided."
NO_PRIORITY = "Not set"
NO_DUE_DATE = "No due date"
NO_COMMENTS = "No comments"

# =============================================================================
# Cache Constants
# =============================================================================

SUMMARY_TABLE = "ticket_summaries"
