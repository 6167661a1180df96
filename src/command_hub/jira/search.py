"""Module for Jira search operations.

Cloud sites are searched through the v3 ``/rest/api/3/search/jql`` endpoint,
which pages with ``nextPageToken`` and allows up to 100 issues per request.
Server/Data Center sites use the v2 search behind ``Jira.jql``, which pages
with ``startAt`` offsets and returns at most 50 issues per request.
"""

import logging
from typing import Any

from ..exceptions import CommandHubError
from ..utils.date import format_jql_date
from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("command-hub.jira")

CLOUD_PAGE_SIZE = 100
SERVER_PAGE_SIZE = 50
DEFAULT_SEARCH_LIMIT = 1000

REPORT_FIELDS = (
    "summary",
    "status",
    "created",
    "resolutiondate",
    "assignee",
    "labels",
)

DONE_TICKETS_JQL = (
    'project = "{project}" AND statusCategory = Done '
    "AND statusCategoryChangedDate >= {start} "
    "AND statusCategoryChangedDate <= {end} ORDER BY created DESC"
)


class SearchMixin(JiraClient):
    """Mixin for JQL searches."""

    @handle_jira_api_errors("Jira API")
    def search_issues(
        self,
        jql: str,
        fields: tuple[str, ...] | list[str] = REPORT_FIELDS,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> list[dict[str, Any]]:
        """
        Search for issues using JQL, following pagination up to ``limit``.

        Args:
            jql: JQL query string
            fields: Issue fields to return
            limit: Maximum number of issues to return

        Returns:
            Raw issue dicts as returned by the search API

        Raises:
            ValueError: If the JQL query is empty
            CommandHubError: If Jira returns an unexpected response
        """
        if not jql or not jql.strip():
            raise ValueError("JQL query cannot be empty")

        logger.debug(f"Searching Jira with JQL: {jql}")
        if self.config.is_cloud:
            issues = self._search_cloud(jql, list(fields), limit)
        else:
            issues = self._search_server(jql, ",".join(fields), limit)

        logger.info(f"Jira search returned {len(issues)} issues")
        return issues

    def _search_cloud(
        self, jql: str, fields: list[str], limit: int
    ) -> list[dict[str, Any]]:
        issues: list[dict[str, Any]] = []
        request_body: dict[str, Any] = {"jql": jql, "fields": fields}
        next_token = None

        while len(issues) < limit:
            request_body["maxResults"] = min(limit - len(issues), CLOUD_PAGE_SIZE)
            if next_token:
                request_body["nextPageToken"] = next_token

            response = self.jira.post("rest/api/3/search/jql", json=request_body)
            if not isinstance(response, dict):
                msg = f"Unexpected response type from Jira search: {type(response).__name__}"
                logger.error(msg)
                raise CommandHubError(msg)

            issues.extend(response.get("issues") or [])
            next_token = response.get("nextPageToken")
            if not next_token:
                break

        return issues[:limit]

    def _search_server(self, jql: str, fields: str, limit: int) -> list[dict[str, Any]]:
        issues: list[dict[str, Any]] = []

        while len(issues) < limit:
            response = self.jira.jql(
                jql,
                fields=fields,
                start=len(issues),
                limit=min(limit - len(issues), SERVER_PAGE_SIZE),
            )
            if not isinstance(response, dict):
                msg = f"Unexpected response type from Jira search: {type(response).__name__}"
                logger.error(msg)
                raise CommandHubError(msg)

            page = response.get("issues") or []
            issues.extend(page)
            if not page or len(issues) >= int(response.get("total") or 0):
                break

        return issues[:limit]

    def search_done_tickets(
        self, start: str, end: str, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[dict[str, Any]]:
        """
        Find tickets in the configured project that moved to Done in a date range.

        Args:
            start: First day of the range (inclusive)
            end: Last day of the range (inclusive)
            limit: Maximum number of issues to return

        Returns:
            Raw issue dicts with the fields the deployment report needs

        Raises:
            ValueError: If a date is invalid or the range is reversed
        """
        start_date = format_jql_date(start)
        end_date = format_jql_date(end)
        if end_date < start_date:
            raise ValueError(f"End date {end_date} is before start date {start_date}")

        jql = DONE_TICKETS_JQL.format(
            project=self.config.project_key, start=start_date, end=end_date
        )
        return self.search_issues(jql, limit=limit)
