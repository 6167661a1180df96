"""
Pydantic models for command-hub.

Ticket classification results live in ``models.ticket``; JIRA REST
structures live in ``models.jira``.
"""

from .base import ApiModel
from .jira import JiraComment, JiraTicket, JiraUser
from .report import DeploymentReport, DeploymentTicket, ReleaseGroup
from .ticket import (
    Classified,
    ClassificationResult,
    CreatedTicket,
    NeedsClarification,
    ParsedTicket,
    TicketOutcome,
    TicketRequest,
)

__all__ = [
    "ApiModel",
    "Classified",
    "ClassificationResult",
    "CreatedTicket",
    "DeploymentReport",
    "DeploymentTicket",
    "JiraComment",
    "JiraTicket",
    "JiraUser",
    "NeedsClarification",
    "ParsedTicket",
    "ReleaseGroup",
    "TicketOutcome",
    "TicketRequest",
]
