"""Jira Package"""

from gojira.jira.client import JiraClient
from gojira.jira.models import Issue, IssueType

__all__ = [
    "JiraClient",
    "Issue",
    "IssueType",
]
