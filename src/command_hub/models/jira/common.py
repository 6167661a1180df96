"""
Common Jira entity models.

Small named entities (users, statuses, priorities, ...) that appear as nested
objects inside issue responses.
"""

from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, UNKNOWN


class JiraUser(ApiModel):
    """Model representing a Jira user."""

    account_id: str | None = None
    display_name: str = UNKNOWN
    email: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            account_id=data.get("accountId"),
            display_name=str(data.get("displayName") or data.get("name") or UNKNOWN),
            email=data.get("emailAddress"),
        )


class JiraNamedEntity(ApiModel):
    """
    Any Jira object identified by its name.

    Statuses, issue types, priorities, projects, components and versions are
    only ever displayed by name here, so they share one model.
    """

    id: str = EMPTY_STRING
    name: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraNamedEntity":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            name=str(data.get("name") or UNKNOWN),
        )

    @staticmethod
    def names(items: Any) -> list[str]:
        """Extract the names from a list of named objects, skipping blanks."""
        if not isinstance(items, list):
            return []
        return [str(item["name"]) for item in items if isinstance(item, dict) and item.get("name")]
