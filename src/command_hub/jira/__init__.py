"""Jira API module for command-hub.

This module provides access to the Jira operations the toolkit uses.
"""

from .client import JiraClient
from .config import JiraConfig
from .issues import IssuesMixin
from .search import SearchMixin


class JiraFetcher(IssuesMixin, SearchMixin):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from the mixins that implement specific functionality
    (reading and creating issues, JQL search), so new areas can be added as
    further mixins.
    """

    pass


__all__ = ["JiraClient", "JiraConfig", "JiraFetcher"]
