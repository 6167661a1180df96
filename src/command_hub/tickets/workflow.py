"""Preview-then-confirm ticket creation, ticket reads and deployment reports."""

import logging
from typing import cast

from ..jira import JiraFetcher
from ..logging_config import ContextualLogger, log_operation
from ..models.jira import JiraTicket
from ..models.report import DeploymentReport
from ..models.ticket import (
    NeedsClarification,
    TicketOutcome,
    TicketRequest,
)
from ..reports import build_deployment_report
from ..utils.date import format_jql_date
from .classifier import classify

logger = cast(ContextualLogger, logging.getLogger("command-hub.tickets"))


class TicketWorkflow:
    """
    Turns a free-text description into a JIRA ticket in two steps.

    The first call (``confirm=False``) only classifies and returns a preview;
    the ticket is filed when the same description is submitted again with
    ``confirm=True``. Descriptions that cannot be attributed to a project
    never reach JIRA.
    """

    def __init__(self, fetcher: JiraFetcher | None = None) -> None:
        self._fetcher = fetcher

    @property
    def fetcher(self) -> JiraFetcher:
        """Jira client, created from the environment on first use."""
        if self._fetcher is None:
            self._fetcher = JiraFetcher()
        return self._fetcher

    def create_ticket(
        self,
        description: str,
        title: str | None = None,
        labels: list[str] | None = None,
        confirm: bool = False,
        priority: str | None = None,
        assignee: str | None = None,
    ) -> TicketOutcome:
        """
        Classify a description and, once confirmed, create the ticket.

        Args:
            description: Free-text description of the issue or request
            title: Custom summary replacing the generated one
            labels: Extra labels; the project label always comes first
            confirm: Create the ticket instead of returning a preview
            priority: Priority name; the configured default when omitted
            assignee: E-mail, name or account ID of the assignee

        Returns:
            TicketOutcome with status "clarification", "preview" or "created"

        Raises:
            CommandHubError: If ticket creation fails in JIRA
        """
        result = classify(description)
        if isinstance(result, NeedsClarification):
            logger.info("Ticket description does not name a project")
            return TicketOutcome(status="clarification", message=result.message)

        ticket = result.ticket
        if title:
            ticket = ticket.model_copy(update={"summary": title})

        request = TicketRequest.from_parsed(ticket, labels).model_copy(
            update={"priority": priority, "assignee": assignee}
        )

        if not confirm:
            return TicketOutcome(status="preview", ticket=ticket, labels=request.labels)

        with log_operation(logger, "create_ticket", project=ticket.project_label):
            created = self.fetcher.create_ticket(request)

        return TicketOutcome(
            status="created",
            message=f"Ticket created successfully: {created.key}",
            ticket=ticket,
            labels=request.labels,
            created=created,
        )

    def read_ticket(self, ticket_key: str) -> JiraTicket:
        """Fetch an existing ticket for display."""
        with log_operation(logger, "read_ticket", ticket=ticket_key):
            return self.fetcher.get_ticket(ticket_key)

    def deployment_report(self, start: str, end: str) -> DeploymentReport:
        """
        Build the deployment report for tickets finished between two dates.

        Raises:
            ValueError: If a date is invalid or the range is reversed
            CommandHubError: If the JIRA search fails
        """
        start_date = format_jql_date(start)
        end_date = format_jql_date(end)
        with log_operation(
            logger, "deployment_report", start=start_date, end=end_date
        ):
            issues = self.fetcher.search_done_tickets(start_date, end_date)
        return build_deployment_report(issues, start=start_date, end=end_date)
