"""
Jira comment models.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN
from .adf import adf_to_text
from .common import JiraUser

logger = logging.getLogger("command-hub.models")


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.
    """

    id: str = JIRA_DEFAULT_ID
    body: str = EMPTY_STRING
    created: str = EMPTY_STRING
    author: JiraUser | None = None

    @property
    def author_name(self) -> str:
        return self.author.display_name if self.author else UNKNOWN

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Cloud comment bodies are ADF documents and are flattened to text;
        Server/Data Center bodies are already plain text.
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary comment data")
            return cls()

        author = None
        if data.get("author"):
            author = JiraUser.from_api_response(data["author"])

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            body=adf_to_text(data.get("body")),
            created=str(data.get("created") or EMPTY_STRING),
            author=author,
        )
