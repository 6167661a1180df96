"""
Deployment report models.

A report groups the tickets finished in a period into releases labelled
``<project>-<deployment type>`` and counts them per project and type.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from .constants import EMPTY_STRING, JIRA_DEFAULT_KEY, UNASSIGNED, UNKNOWN

DeploymentType = Literal["Normal", "Hotfix", "Rollback"]

DEPLOYMENT_TYPES: tuple[DeploymentType, ...] = ("Normal", "Hotfix", "Rollback")
REPORT_PROJECTS = ("TRIC", "DTMI", "TRMI")


class DeploymentTicket(BaseModel):
    """A finished ticket as seen by the deployment report."""

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    project: str = UNKNOWN
    deployment_type: DeploymentType = "Normal"
    status: str = UNKNOWN
    created: str = EMPTY_STRING
    resolved: str | None = None
    assignee: str = UNASSIGNED
    labels: list[str] = Field(default_factory=list)

    @property
    def release_label(self) -> str:
        return f"{self.project}-{self.deployment_type}"


class ReleaseEntry(BaseModel):
    ticket: str
    title: str
    done_date: str | None = None
    release_type: DeploymentType
    project: str


class ReleaseGroup(BaseModel):
    label: str
    tickets: list[ReleaseEntry] = Field(default_factory=list)


class ReportMetadata(BaseModel):
    total_tickets: int = 0
    total_releases: int = 0
    start: str | None = None
    end: str | None = None


class DeploymentReport(BaseModel):
    """Releases in a period with per-type, per-project ticket counts."""

    summary: dict[str, dict[str, int]] = Field(default_factory=dict)
    releases: list[ReleaseGroup] = Field(default_factory=list)
    metadata: ReportMetadata = Field(default_factory=ReportMetadata)

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "releases": [release.model_dump() for release in self.releases],
            "metadata": self.metadata.model_dump(exclude_none=True),
        }
