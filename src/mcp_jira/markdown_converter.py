"""Markdown to Atlassian Document Format (ADF) conversion.

Only a small subset of markdown is understood:

- ``#`` headings, where the number of leading ``#`` is the heading level
- ``-`` / ``*`` bullet items, consecutive items forming one bullet list
- anything else is a plain paragraph, kept verbatim

Inline markup (emphasis, links, code spans) is not parsed.
"""

import re
from typing import Any

ADF_VERSION = 1

HEADING_MARKER_PATTERN = re.compile(r"^#+")
HEADING_PREFIX_PATTERN = re.compile(r"^#+\s+")
LIST_ITEM_PATTERN = re.compile(r"^[-*]\s+")


def _text_node(text: str) -> dict[str, Any]:
    return {"type": "text", "text": text}


def _paragraph(text: str) -> dict[str, Any]:
    return {"type": "paragraph", "content": [_text_node(text)]}


def _heading(line: str) -> dict[str, Any]:
    marker = HEADING_MARKER_PATTERN.match(line)
    # Level is not clamped to 6; Jira decides what it accepts
    level = len(marker.group(0)) if marker else 1
    # The #s are only stripped when whitespace follows them
    text = HEADING_PREFIX_PATTERN.sub("", line, count=1)
    return {
        "type": "heading",
        "attrs": {"level": level},
        "content": [_text_node(text)],
    }


def _list_item(line: str) -> dict[str, Any]:
    return {
        "type": "listItem",
        "content": [_paragraph(LIST_ITEM_PATTERN.sub("", line, count=1))],
    }


def markdown_to_adf(markdown: str) -> dict[str, Any]:
    """
    Convert markdown text to an ADF document.

    Lines are processed in order. Blank lines are dropped and do not end an
    open bullet list; any other non-list line does.

    Args:
        markdown: The markdown text to convert

    Returns:
        ADF document dict with ``type`` "doc" and ``version`` 1
    """
    content: list[dict[str, Any]] = []
    current_list: list[dict[str, Any]] | None = None

    for raw_line in markdown.split("\n"):
        line = raw_line.removesuffix("\r")
        if not line.strip():
            continue

        if LIST_ITEM_PATTERN.match(line):
            if current_list is None:
                current_list = []
                content.append({"type": "bulletList", "content": current_list})
            current_list.append(_list_item(line))
            continue

        current_list = None
        if line.startswith("#"):
            content.append(_heading(line))
        else:
            content.append(_paragraph(line))

    return {"type": "doc", "version": ADF_VERSION, "content": content}
