"""Module for Jira issue operations."""

import logging
import re
from typing import Any

from ..exceptions import CommandHubError, InvalidTicketKeyError
from ..models.jira import JiraTicket, current_desired_to_adf
from ..models.jira.adf import CURRENT_HEADING, DESIRED_HEADING
from ..models.ticket import CreatedTicket, TicketRequest
from ..utils.decorators import handle_jira_api_errors
from ..utils.urls import browse_url
from .client import JiraClient

logger = logging.getLogger("command-hub.jira")

TICKET_KEY_PATTERN = re.compile(r"^[A-Z]+-\d+$")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    @staticmethod
    def validate_ticket_key(ticket_key: str) -> str:
        """
        Check a ticket key is in PROJECT-123 form.

        Raises:
            InvalidTicketKeyError: If the key is empty or malformed
        """
        if not ticket_key or not TICKET_KEY_PATTERN.match(ticket_key):
            raise InvalidTicketKeyError(
                f"Invalid ticket key format: {ticket_key}. Expected format: PROJECT-123"
            )
        return ticket_key

    @handle_jira_api_errors("Jira API")
    def get_ticket(self, ticket_key: str) -> JiraTicket:
        """
        Get a Jira ticket by key.

        Args:
            ticket_key: The issue key (e.g., FRON-1151)

        Returns:
            JiraTicket with the most recent comments attached

        Raises:
            InvalidTicketKeyError: If the key is malformed
            TicketNotFoundError: If the ticket does not exist
            CommandHubAuthenticationError: If credentials are rejected
        """
        self.validate_ticket_key(ticket_key)
        logger.info(f"Fetching Jira ticket {ticket_key}")

        issue = self.jira.issue(ticket_key)
        if not isinstance(issue, dict) or not issue:
            raise CommandHubError(f"Unexpected response for ticket {ticket_key}")

        return JiraTicket.from_api_response(issue, base_url=self.config.url)

    def _format_description(self, current: str, desired: str) -> dict[str, Any] | str:
        """Render the Current/Desired body in the format the API version expects."""
        if self.config.is_cloud:
            return current_desired_to_adf(current, desired)
        # Server/DC v2 takes wiki markup
        return f"*{CURRENT_HEADING}*\n{current}\n\n*{DESIRED_HEADING}*\n{desired}"

    def _resolve_assignee(self, assignee: str) -> dict[str, str]:
        """
        Build the assignee field from an e-mail, name or account ID.

        Cloud needs an accountId, so e-mails and names are looked up; Server/DC
        accepts the user name directly.
        """
        if not self.config.is_cloud:
            return {"name": assignee}

        if "@" not in assignee and " " not in assignee:
            return {"accountId": assignee}

        users = self.jira.user_find_by_user_string(query=assignee)
        if not users:
            raise CommandHubError(f"No Jira user found for assignee '{assignee}'")
        if len(users) > 1:
            logger.warning(
                f"Multiple users found for '{assignee}', using first match"
            )
        account_id = users[0].get("accountId")
        if not account_id:
            raise CommandHubError(f"Jira user '{assignee}' has no account ID")
        return {"accountId": account_id}

    @handle_jira_api_errors("Jira API")
    def create_ticket(self, request: TicketRequest) -> CreatedTicket:
        """
        Create a new Jira ticket in the configured project.

        Args:
            request: Summary, Current/Desired text, type, labels and optional
                priority and assignee

        Returns:
            CreatedTicket with the new key, id and browse URL

        Raises:
            CommandHubError: If JIRA rejects the ticket or returns no key
        """
        fields: dict[str, Any] = {
            "project": {"key": self.config.project_key},
            "summary": request.summary,
            "description": self._format_description(request.current, request.desired),
            "issuetype": {"name": request.issue_type or "Task"},
            "priority": {"name": request.priority or self.config.default_priority},
            "labels": list(request.labels),
        }
        if request.assignee:
            fields["assignee"] = self._resolve_assignee(request.assignee)

        logger.info(
            f"Creating {fields['issuetype']['name']} in {self.config.project_key}: "
            f"{request.summary}"
        )
        response = self.jira.create_issue(fields=fields)
        ticket_key = (response or {}).get("key")
        if not ticket_key:
            raise CommandHubError("No issue key returned from Jira API")

        created = CreatedTicket(
            key=ticket_key,
            id=str(response.get("id", "")),
            url=browse_url(self.config.url, ticket_key),
            self_url=response.get("self"),
        )
        logger.info(f"Created Jira ticket {created.key}: {created.url}")
        return created
