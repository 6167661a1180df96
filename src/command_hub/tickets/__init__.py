"""Ticket classification and creation."""

from .classifier import (
    CLARIFICATION_MESSAGE,
    classify,
    generate_summary,
    infer_issue_type,
    infer_project_label,
)
from .formatting import render_preview, render_ticket
from .workflow import TicketWorkflow

__all__ = [
    "CLARIFICATION_MESSAGE",
    "TicketWorkflow",
    "classify",
    "generate_summary",
    "infer_issue_type",
    "infer_project_label",
    "render_preview",
    "render_ticket",
]
