"""
Free-text ticket classifier.

Turns an unstructured problem/request description into a ticket: which
project it belongs to, whether it is a Bug or a Task, what currently happens
and what should happen instead, plus a short summary line.
"""

import logging
import math
import re

from ..models.ticket import (
    Classified,
    ClassificationResult,
    IssueType,
    NeedsClarification,
    ParsedTicket,
    ProjectLabel,
)

logger = logging.getLogger("command-hub.tickets")

# Checked in order; the first group with a substring hit wins.
PROJECT_KEYWORDS: dict[ProjectLabel, tuple[str, ...]] = {
    "DTMI": ("dtmi", "discount tire", "discount-tire"),
    "TRMI": ("trmi", "treadware", "asap fork", "asap-fork"),
    "TRIC": ("tric", "trickware"),
    "SHM": ("shm", "shop management"),
}
PROJECT_TOKEN_PATTERN = re.compile(r"\b(DTMI|TRMI|TRIC|SHM)\b", re.IGNORECASE)

BUG_KEYWORDS = (
    "bug",
    "broken",
    "error",
    "issue",
    "problem",
    "not working",
    "fails",
    "crash",
)

CLARIFICATION_MESSAGE = (
    "Unable to determine which project this ticket is for. Please specify: "
    "DTMI, TRMI/Tire Rack, TRIC/Treadware, or SHM in your description."
)

CURRENT_MARKER_PATTERN = re.compile(
    r"current[:\s]+(.*?)(?=desired|$)", re.IGNORECASE | re.DOTALL
)
DESIRED_MARKER_PATTERN = re.compile(r"desired[:\s]+(.*?)$", re.IGNORECASE | re.DOTALL)
# A label is only a tag when it stands alone after a sentence or line end
TRAILING_PROJECT_TAG_PATTERN = re.compile(
    r"(?:(?<=[.!\n])|^)\s*\b(?:DTMI|TRMI|TRIC|SHM)\b[.!]*\s*$", re.IGNORECASE
)
SENTENCE_BOUNDARY_PATTERN = re.compile(r"[.!]+")

CURRENT_PLACEHOLDER = "Current behavior needs documentation"
DESIRED_PLACEHOLDER = "Desired behavior needs specification"

FEATURE_PATTERN = re.compile(
    r"(page|dashboard|form|login|signup|checkout|order|user)", re.IGNORECASE
)
ACTION_PATTERN = re.compile(
    r"(show|display|work|allow|enable|fix|create|add)", re.IGNORECASE
)
SUMMARY_STOPWORDS = frozenset(
    {"should", "would", "could", "when", "then", "that", "this"}
)
SUMMARY_WORD_COUNT = 4
SUMMARY_MIN_WORD_LENGTH = 4


def infer_project_label(text: str) -> ProjectLabel | None:
    """Return the project a description refers to, or None if it is unclear."""
    lowered = text.lower()
    for label, keywords in PROJECT_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return label

    match = PROJECT_TOKEN_PATTERN.search(text)
    if match:
        return match.group(1).upper()  # type: ignore[return-value]
    return None


def infer_issue_type(text: str) -> IssueType:
    lowered = text.lower()
    return "Bug" if any(keyword in lowered for keyword in BUG_KEYWORDS) else "Task"


def _strip_project_tag(section: str) -> str:
    return TRAILING_PROJECT_TAG_PATTERN.sub("", section).strip()


def extract_marked_sections(text: str) -> tuple[str, str] | None:
    """
    Pull explicit "Current: ... Desired: ..." sections out of the text.

    Returns:
        ``(current, desired)`` when both markers are present, else None.
    """
    current_match = CURRENT_MARKER_PATTERN.search(text)
    desired_match = DESIRED_MARKER_PATTERN.search(text)
    if not current_match or not desired_match:
        return None
    return (
        _strip_project_tag(current_match.group(1)),
        _strip_project_tag(desired_match.group(1)),
    )


def split_sentences(text: str) -> tuple[str, str]:
    """
    Split text at its sentence midpoint.

    The first ``ceil(N / 2)`` sentences form the current behavior and the
    rest the desired behavior. Either half may come back empty.
    """
    sentences = [
        fragment for fragment in SENTENCE_BOUNDARY_PATTERN.split(text) if fragment.strip()
    ]
    midpoint = math.ceil(len(sentences) / 2)
    return (
        ". ".join(sentences[:midpoint]).strip(),
        ". ".join(sentences[midpoint:]).strip(),
    )


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def generate_summary(
    current: str,
    desired: str,
    issue_type: IssueType = "Task",
    project_label: str | None = None,
) -> str:
    """
    Build a short ticket title from the current and desired text.

    Prefers "<action> <feature>" when the current text names a feature and
    the desired text names an action; otherwise falls back to the first few
    meaningful words.
    """
    feature_match = FEATURE_PATTERN.search(current)
    action_match = ACTION_PATTERN.search(desired)

    if feature_match and action_match:
        summary = _capitalize_first(f"{action_match.group(1)} {feature_match.group(1)}")
    else:
        words = (
            current.lower().replace("\n", " ").split(" ")
            + desired.lower().replace("\n", " ").split(" ")
        )
        meaningful = [
            word
            for word in words
            if len(word) >= SUMMARY_MIN_WORD_LENGTH and word not in SUMMARY_STOPWORDS
        ][:SUMMARY_WORD_COUNT]
        summary = _capitalize_first(" ".join(meaningful))

    summary = (summary or f"{issue_type} - needs description").replace("\n", " ").strip()
    return f"[{project_label}] {summary}" if project_label else summary


def classify(text: str) -> ClassificationResult:
    """
    Classify a free-text ticket description.

    Never raises: an input that cannot be attributed to a project yields
    ``NeedsClarification`` so an interactive caller can ask the user.

    Args:
        text: Natural-language description of the problem or request

    Returns:
        ``Classified`` with the parsed ticket, or ``NeedsClarification``
    """
    project_label = infer_project_label(text)
    if project_label is None:
        logger.debug("No project label found in ticket description")
        return NeedsClarification(message=CLARIFICATION_MESSAGE)

    issue_type = infer_issue_type(text)

    sections = extract_marked_sections(text)
    current, desired = sections or split_sentences(text)

    # Summary comes from the raw halves, before placeholders are filled in
    summary = generate_summary(current, desired, issue_type, project_label)
    current = current or CURRENT_PLACEHOLDER
    desired = desired or DESIRED_PLACEHOLDER

    logger.debug(
        f"Classified ticket as {issue_type} for {project_label} "
        f"({'explicit sections' if sections else 'sentence split'})"
    )
    return Classified(
        ticket=ParsedTicket(
            summary=summary,
            current=current,
            desired=desired,
            project_label=project_label,
            issue_type=issue_type,
        )
    )
