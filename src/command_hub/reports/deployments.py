"""
Deployment report built from tickets finished in a period.

Each ticket is a Hotfix or Rollback when a label or its summary says so,
otherwise a Normal release. Its project comes from the TRIC, DTMI or TRMI
label. Tickets sharing project and type form one release.
"""

import logging
from typing import Any

from ..models.constants import EMPTY_STRING, JIRA_DEFAULT_KEY, UNASSIGNED, UNKNOWN
from ..models.report import (
    DEPLOYMENT_TYPES,
    REPORT_PROJECTS,
    DeploymentReport,
    DeploymentTicket,
    DeploymentType,
    ReleaseEntry,
    ReleaseGroup,
    ReportMetadata,
)
from ..utils.date import parse_date_human_readable

logger = logging.getLogger("command-hub.reports")

SUMMARY_SECTION_TITLES: dict[DeploymentType, str] = {
    "Normal": "Normal Releases",
    "Hotfix": "Hotfixes",
    "Rollback": "Rollbacks",
}


def infer_deployment_type(labels: list[str], summary: str) -> DeploymentType:
    """Hotfix wins over Rollback; anything else is a Normal release."""

    def mentions(marker: str) -> bool:
        return any(marker in label.lower() for label in labels) or (
            marker in summary.lower()
        )

    if mentions("hotfix"):
        return "Hotfix"
    if mentions("rollback"):
        return "Rollback"
    return "Normal"


def infer_report_project(labels: list[str]) -> str:
    for project in REPORT_PROJECTS:
        if project in labels:
            return project
    return UNKNOWN


def to_deployment_ticket(issue: dict[str, Any]) -> DeploymentTicket:
    """Build a DeploymentTicket from a raw search result issue."""
    fields = issue.get("fields") or {}
    labels = [str(label) for label in fields.get("labels") or []]
    summary = str(fields.get("summary") or EMPTY_STRING)
    assignee = fields.get("assignee") or {}

    return DeploymentTicket(
        key=str(issue.get("key") or JIRA_DEFAULT_KEY),
        summary=summary,
        project=infer_report_project(labels),
        deployment_type=infer_deployment_type(labels, summary),
        status=str((fields.get("status") or {}).get("name") or UNKNOWN),
        created=str(fields.get("created") or EMPTY_STRING),
        resolved=fields.get("resolutiondate"),
        assignee=str(assignee.get("displayName") or UNASSIGNED),
        labels=labels,
    )


def build_deployment_report(
    issues: list[dict[str, Any]],
    start: str | None = None,
    end: str | None = None,
) -> DeploymentReport:
    """
    Group finished tickets into releases and count them.

    Releases are listed in the order their first ticket appears. The summary
    counts only the TRIC, DTMI and TRMI projects; tickets without one of
    those labels still form an ``Unknown-<type>`` release.

    Args:
        issues: Raw issues from a JQL search
        start: First day of the reported period, for the metadata
        end: Last day of the reported period, for the metadata

    Returns:
        DeploymentReport
    """
    tickets = [to_deployment_ticket(issue) for issue in issues]

    breakdown = {
        deployment_type: {
            project: sum(
                1
                for ticket in tickets
                if ticket.project == project
                and ticket.deployment_type == deployment_type
            )
            for project in REPORT_PROJECTS
        }
        for deployment_type in DEPLOYMENT_TYPES
    }

    releases: dict[str, ReleaseGroup] = {}
    for ticket in tickets:
        release = releases.setdefault(
            ticket.release_label, ReleaseGroup(label=ticket.release_label)
        )
        release.tickets.append(
            ReleaseEntry(
                ticket=ticket.key,
                title=ticket.summary,
                done_date=ticket.resolved,
                release_type=ticket.deployment_type,
                project=ticket.project,
            )
        )

    logger.debug(f"Grouped {len(tickets)} tickets into {len(releases)} releases")
    return DeploymentReport(
        summary=breakdown,
        releases=list(releases.values()),
        metadata=ReportMetadata(
            total_tickets=len(tickets),
            total_releases=len(releases),
            start=start,
            end=end,
        ),
    )


def render_report_summary(report: DeploymentReport) -> str:
    """Render the plain-text summary of a deployment report."""
    title = "JIRA Deployment Report"
    lines = [title, "=" * len(title), ""]

    metadata = report.metadata
    if metadata.start and metadata.end:
        lines += [
            f"Period: {parse_date_human_readable(metadata.start)} - "
            f"{parse_date_human_readable(metadata.end)}",
            "",
        ]

    lines += [
        f"Total Issues: {metadata.total_tickets}",
        f"Total Releases: {metadata.total_releases}",
        "",
        "Breakdown by Project and Type:",
    ]
    for deployment_type in DEPLOYMENT_TYPES:
        lines.append(f"  {SUMMARY_SECTION_TITLES[deployment_type]}:")
        counts = report.summary.get(deployment_type, {})
        for project in REPORT_PROJECTS:
            lines.append(f"    - {project}: {counts.get(project, 0)}")

    return "\n".join(lines)
