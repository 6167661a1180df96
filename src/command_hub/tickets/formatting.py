"""Plain-text rendering of ticket previews and fetched tickets."""

from ..models.jira import JiraTicket
from ..models.ticket import ParsedTicket
from ..utils.date import parse_datetime_human_readable

RULE_WIDTH = 80


def render_description(current: str, desired: str) -> str:
    return f"**Current**\n{current}\n\n**Desired**\n{desired}"


def render_preview(ticket: ParsedTicket, labels: list[str] | None = None) -> str:
    """Render a parsed ticket for the requester to confirm."""
    lines = [
        "Ticket Preview",
        "=" * 18,
        f"Title: {ticket.summary}",
        f"Type: {ticket.issue_type}",
        f"Project Label: {ticket.project_label or 'None'}",
    ]
    if labels:
        lines.append(f"Labels: {', '.join(labels)}")
    lines += [
        "",
        "Description:",
        render_description(ticket.current, ticket.desired),
        "=" * 18,
    ]
    return "\n".join(lines)


def render_ticket(ticket: JiraTicket) -> str:
    """Render a fetched ticket with its metadata and recent comments."""
    rule = "=" * RULE_WIDTH
    lines = [
        rule,
        f"{ticket.key}: {ticket.summary}",
        rule,
        "",
        f"Project: {ticket.project}",
        f"URL: {ticket.url or 'Unknown'}",
        f"Status: {ticket.status}",
        f"Type: {ticket.issue_type}",
        f"Priority: {ticket.priority}",
        f"Assignee: {ticket.assignee}",
        f"Reporter: {ticket.reporter}",
        f"Created: {parse_datetime_human_readable(ticket.created) or 'Unknown'}",
        f"Updated: {parse_datetime_human_readable(ticket.updated) or 'Unknown'}",
    ]
    if ticket.labels:
        lines.append(f"Labels: {', '.join(ticket.labels)}")
    if ticket.components:
        lines.append(f"Components: {', '.join(ticket.components)}")
    if ticket.fix_versions:
        lines.append(f"Fix Versions: {', '.join(ticket.fix_versions)}")

    lines += ["", "Description:", "-" * 40, ticket.description]

    if ticket.comments:
        lines += ["", "Recent Comments:", "-" * 40]
        for index, comment in enumerate(ticket.comments):
            created = parse_datetime_human_readable(comment.created) or "Unknown date"
            lines += ["", f"**{comment.author_name}** ({created}):", comment.body]
            if index < len(ticket.comments) - 1:
                lines.append("-" * 20)

    lines += ["", rule]
    return "\n".join(lines)
