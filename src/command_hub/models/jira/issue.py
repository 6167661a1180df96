"""
Jira issue models.

This module provides the Pydantic model used to display an existing ticket.
"""

import logging
from typing import Any

from pydantic import Field

from ...utils.urls import browse_url
from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
    NO_DESCRIPTION,
    NO_PRIORITY,
    NO_REPORTER,
    NO_SUMMARY,
    UNASSIGNED,
    UNKNOWN,
)
from .adf import adf_to_text
from .comment import JiraComment
from .common import JiraNamedEntity, JiraUser

logger = logging.getLogger("command-hub.models")

RECENT_COMMENT_LIMIT = 3


class JiraTicket(ApiModel):
    """
    Model representing a Jira issue as shown to the requester.

    Missing fields fall back to display placeholders ("Unassigned",
    "No priority set", ...) rather than None.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    url: str | None = None
    summary: str = NO_SUMMARY
    description: str = NO_DESCRIPTION
    status: str = UNKNOWN
    priority: str = NO_PRIORITY
    assignee: str = UNASSIGNED
    reporter: str = NO_REPORTER
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    issue_type: str = UNKNOWN
    project: str = UNKNOWN
    labels: list[str] = Field(default_factory=list)
    components: list[str] = Field(default_factory=list)
    fix_versions: list[str] = Field(default_factory=list)
    comments: list[JiraComment] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTicket":
        """
        Create a JiraTicket from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``base_url`` builds the browse URL; ``comment_limit``
                caps the number of most recent comments kept

        Returns:
            A JiraTicket instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls()

        fields = data.get("fields") or {}
        if not isinstance(fields, dict):
            fields = {}

        key = str(data.get("key") or JIRA_DEFAULT_KEY)
        base_url = kwargs.get("base_url")
        comment_limit = kwargs.get("comment_limit", RECENT_COMMENT_LIMIT)

        description = adf_to_text(fields.get("description")) or NO_DESCRIPTION

        assignee = UNASSIGNED
        if fields.get("assignee"):
            assignee = JiraUser.from_api_response(fields["assignee"]).display_name

        reporter = NO_REPORTER
        if fields.get("reporter"):
            reporter = JiraUser.from_api_response(fields["reporter"]).display_name

        priority = NO_PRIORITY
        if fields.get("priority"):
            priority = JiraNamedEntity.from_api_response(fields["priority"]).name

        raw_comments = (fields.get("comment") or {}).get("comments") or []
        if comment_limit:
            raw_comments = raw_comments[-comment_limit:]

        return cls(
            id=str(data.get("id", JIRA_DEFAULT_ID)),
            key=key,
            url=browse_url(base_url, key) if base_url else None,
            summary=str(fields.get("summary") or NO_SUMMARY),
            description=description,
            status=JiraNamedEntity.from_api_response(fields.get("status")).name,
            priority=priority,
            assignee=assignee,
            reporter=reporter,
            created=str(fields.get("created") or EMPTY_STRING),
            updated=str(fields.get("updated") or EMPTY_STRING),
            issue_type=JiraNamedEntity.from_api_response(fields.get("issuetype")).name,
            project=JiraNamedEntity.from_api_response(fields.get("project")).name,
            labels=[str(label) for label in fields.get("labels") or []],
            components=JiraNamedEntity.names(fields.get("components")),
            fix_versions=JiraNamedEntity.names(fields.get("fixVersions")),
            comments=[JiraComment.from_api_response(c) for c in raw_comments],
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "key": self.key,
            "url": self.url,
            "summary": self.summary,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "assignee": self.assignee,
            "reporter": self.reporter,
            "created": self.created,
            "updated": self.updated,
            "issue_type": self.issue_type,
            "project": self.project,
        }
        if self.labels:
            result["labels"] = self.labels
        if self.components:
            result["components"] = self.components
        if self.fix_versions:
            result["fix_versions"] = self.fix_versions
        if self.comments:
            result["comments"] = [
                {
                    "author": comment.author_name,
                    "created": comment.created,
                    "body": comment.body,
                }
                for comment in self.comments
            ]
        return result
