"""
Atlassian Document Format (ADF) utilities.

JIRA Cloud returns and accepts rich text (descriptions, comment bodies) as ADF
documents. This module renders ADF to plain text for display and builds the
two-section Current/Desired document used for new tickets.
"""

from typing import Any

CURRENT_HEADING = "Current"
DESIRED_HEADING = "Desired"


def _text(text: str, strong: bool = False) -> dict[str, Any]:
    node: dict[str, Any] = {"type": "text", "text": text}
    if strong:
        node["marks"] = [{"type": "strong"}]
    return node


def _paragraph(text: str, strong: bool = False) -> dict[str, Any]:
    return {"type": "paragraph", "content": [_text(text, strong)]}


def current_desired_to_adf(current: str, desired: str) -> dict[str, Any]:
    """
    Build the ADF description for a Current/Desired ticket.

    The document holds a bold "Current" heading paragraph, the current text,
    an empty spacer paragraph, a bold "Desired" heading paragraph and the
    desired text.

    Args:
        current: Current behavior text
        desired: Desired behavior text

    Returns:
        ADF document dict ready to send as the ``description`` field
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            _paragraph(CURRENT_HEADING, strong=True),
            _paragraph(current),
            _paragraph(""),
            _paragraph(DESIRED_HEADING, strong=True),
            _paragraph(desired),
        ],
    }


def _render(node: Any) -> str:
    if node is None:
        return ""
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        return "".join(_render(child) for child in node)
    if not isinstance(node, dict):
        return ""

    node_type = node.get("type")
    children = node.get("content") or []

    if node_type == "text":
        return node.get("text", "")
    if node_type == "hardBreak":
        return "\n"
    if node_type == "inlineCard":
        url = (node.get("attrs") or {}).get("url")
        return f"[{url}]" if url else ""
    if node_type in ("paragraph", "heading"):
        return _render(children) + "\n\n"
    if node_type == "listItem":
        return "• " + _render(children).strip() + "\n"
    if node_type in ("bulletList", "orderedList"):
        return _render(children) + "\n"
    if node_type == "codeBlock":
        return f"```\n{_render(children)}\n```\n\n"
    return _render(children)


def adf_to_text(adf_content: dict | list | str | None) -> str:
    """
    Convert Atlassian Document Format (ADF) content to plain text.

    Paragraphs and headings are separated by blank lines, list items are
    bulleted with "• ", code blocks are fenced and inline cards render as
    ``[url]``. Plain strings (Server/Data Center) pass through unchanged.

    Args:
        adf_content: ADF document (dict), content list, string, or None

    Returns:
        Plain text, stripped of surrounding whitespace; empty for None
    """
    if adf_content is None:
        return ""
    if isinstance(adf_content, str):
        return adf_content
    return _render(adf_content).strip()
