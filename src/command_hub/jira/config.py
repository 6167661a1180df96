"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass
from typing import Literal

from ..utils.env import getenv_any, is_env_ssl_verify
from ..utils.urls import is_atlassian_cloud_url

DEFAULT_PROJECT_KEY = "FRON"
DEFAULT_PRIORITY = "Medium"


@dataclass
class JiraConfig:
    """Jira API configuration.

    Handles authentication for both Jira Cloud (using username/API token)
    and Jira Server/Data Center (using personal access token), plus where
    new tickets are filed.
    """

    url: str  # Base URL for Jira
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Email or username (Cloud)
    api_token: str | None = None  # API token (Cloud)
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    project_key: str = DEFAULT_PROJECT_KEY  # Project new tickets are filed into
    default_priority: str = DEFAULT_PRIORITY  # Priority for new tickets

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
            Localhost URLs are always considered non-cloud (Server/Data Center).
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def api_version(self) -> str:
        """REST API version: Cloud uses v3 (ADF bodies), Server/DC uses v2."""
        return "3" if self.is_cloud else "2"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        ``JIRA_USERNAME``/``JIRA_API_TOKEN`` are preferred; the older
        ``JIRA_EMAIL``/``JIRA_TOKEN`` names are accepted as fallbacks.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = cls.get_url()

        username = getenv_any("JIRA_USERNAME", "JIRA_EMAIL")
        api_token = getenv_any("JIRA_API_TOKEN", "JIRA_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        is_cloud = is_atlassian_cloud_url(url)

        match (is_cloud, bool(username and api_token), bool(personal_token)):
            case (True, True, _):
                auth_type = "basic"
            case (True, False, _):
                msg = "Cloud authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(msg)
            case (False, _, True):
                auth_type = "token"
            case (False, True, False):
                auth_type = "basic"
            case _:
                msg = "Server/Data Center authentication requires JIRA_PERSONAL_TOKEN"
                raise ValueError(msg)

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
            project_key=os.getenv("JIRA_PROJECT_KEY") or DEFAULT_PROJECT_KEY,
            default_priority=os.getenv("JIRA_DEFAULT_PRIORITY") or DEFAULT_PRIORITY,
        )

    @staticmethod
    def get_url() -> str:
        """Get the Jira URL from environment variables.

        Returns:
            The Jira URL, without a trailing slash
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)
        return url.rstrip("/")
