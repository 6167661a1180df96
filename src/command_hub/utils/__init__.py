"""
Utility functions for command-hub.
This package provides helpers shared by the JIRA client and the CLI.
"""

from .date import (
    format_jql_date,
    parse_date,
    parse_date_human_readable,
    parse_datetime_human_readable,
)
from .decorators import handle_jira_api_errors
from .env import getenv_any, is_env_ssl_verify
from .urls import browse_url, is_atlassian_cloud_url

__all__ = [
    "browse_url",
    "format_jql_date",
    "getenv_any",
    "handle_jira_api_errors",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "parse_date",
    "parse_date_human_readable",
    "parse_datetime_human_readable",
]
