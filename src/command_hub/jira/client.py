"""Base client module for Jira API interactions."""

import logging

from atlassian import Jira

from .config import JiraConfig

logger = logging.getLogger("command-hub.jira")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ValueError: If configuration is missing or invalid.
        """
        self.config = config if config is not None else JiraConfig.from_env()

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                api_version=self.config.api_version,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                api_version=self.config.api_version,
            )

        if not self.config.ssl_verify:
            logger.warning(
                f"SSL verification disabled for Jira at {self.config.url}. "
                "This is insecure and should only be used in testing environments."
            )

        logger.debug(
            f"Jira client ready for {self.config.url} "
            f"(auth={self.config.auth_type}, api=v{self.config.api_version})"
        )
