"""
Jira data models for command-hub.

This package provides Pydantic models for the Jira API data structures the
toolkit reads, plus ADF helpers for ticket descriptions.
"""

from .adf import adf_to_text, current_desired_to_adf
from .comment import JiraComment
from .common import JiraNamedEntity, JiraUser
from .issue import JiraTicket

__all__ = [
    "JiraComment",
    "JiraNamedEntity",
    "JiraTicket",
    "JiraUser",
    "adf_to_text",
    "current_desired_to_adf",
]
