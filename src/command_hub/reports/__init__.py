"""Reports built from JIRA search results."""

from .deployments import (
    build_deployment_report,
    infer_deployment_type,
    infer_report_project,
    render_report_summary,
    to_deployment_ticket,
)

__all__ = [
    "build_deployment_report",
    "infer_deployment_type",
    "infer_report_project",
    "render_report_summary",
    "to_deployment_ticket",
]
