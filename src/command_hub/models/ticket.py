"""
Ticket classification and creation models.

``classify`` returns one of two variants: ``Classified`` wrapping a
``ParsedTicket``, or ``NeedsClarification`` carrying the message to show the
requester. Both expose ``needs_project_clarification`` so callers can branch
on either the type or the flag.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ProjectLabel = Literal["DTMI", "TRMI", "TRIC", "SHM"]
IssueType = Literal["Bug", "Task"]


class ParsedTicket(BaseModel):
    """Structured ticket content inferred from free text."""

    model_config = ConfigDict(frozen=True)

    summary: str
    current: str
    desired: str
    project_label: ProjectLabel | None = None
    issue_type: IssueType = "Task"

    @property
    def needs_project_clarification(self) -> bool:
        return False

    @property
    def labels(self) -> list[str]:
        return [self.project_label] if self.project_label else []


class Classified(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["classified"] = "classified"
    ticket: ParsedTicket

    @property
    def needs_project_clarification(self) -> bool:
        return False


class NeedsClarification(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["needs_clarification"] = "needs_clarification"
    message: str

    @property
    def needs_project_clarification(self) -> bool:
        return True


ClassificationResult = Annotated[
    Classified | NeedsClarification, Field(discriminator="kind")
]


class TicketRequest(BaseModel):
    """Everything needed to file a ticket in JIRA."""

    summary: str
    current: str
    desired: str
    issue_type: str = "Task"
    priority: str | None = None
    assignee: str | None = None
    labels: list[str] = Field(default_factory=list)

    @classmethod
    def from_parsed(
        cls, ticket: ParsedTicket, extra_labels: list[str] | None = None
    ) -> "TicketRequest":
        """Build a request, putting the project label ahead of caller labels."""
        labels: list[str] = []
        for label in [*ticket.labels, *(extra_labels or [])]:
            if label and label not in labels:
                labels.append(label)
        return cls(
            summary=ticket.summary,
            current=ticket.current,
            desired=ticket.desired,
            issue_type=ticket.issue_type,
            labels=labels,
        )


class CreatedTicket(BaseModel):
    """Identifiers JIRA returns for a newly created ticket."""

    key: str
    id: str
    url: str
    self_url: str | None = Field(default=None, alias="self")

    model_config = ConfigDict(populate_by_name=True)


class TicketOutcome(BaseModel):
    """Result of one pass through the preview-then-confirm ticket flow."""

    status: Literal["clarification", "preview", "created"]
    message: str = ""
    ticket: ParsedTicket | None = None
    labels: list[str] = Field(default_factory=list)
    created: CreatedTicket | None = None

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status}
        if self.message:
            result["message"] = self.message
        if self.ticket:
            result["ticket"] = self.ticket.model_dump()
            result["labels"] = self.labels
        if self.created:
            result["created"] = self.created.model_dump(by_alias=True)
        return result
