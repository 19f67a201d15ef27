# src/response_kit/formatting/classifier.py

import re
from dataclasses import dataclass, field
from typing import Any

from .config import FormattingOptions, resolve_options
from .models import SectionType

FENCE = "```"
ATX_HEADER = re.compile(r"^(#{1,6})\s+(.+)$")
NUMBERED_SECTION = re.compile(r"^(\d+)\.\s*([A-Z][A-Z\s]*[A-Z])(?::|\s|$)\s*(.*)$")
BOLD_HEADER = re.compile(r"^\*\*([A-Z][A-Z\s]*[A-Z]):\*\*\s*(.*)$")
UNORDERED_ITEM = re.compile(r"^[-*+•]\s+")
ORDERED_ITEM = re.compile(r"^\d+\.\s+")


@dataclass(frozen=True)
class LineClass:
    """Structural classification of a single line."""

    type: SectionType
    content: str
    level: int | None = None
    title: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def is_fence(line: str) -> bool:
    return line.strip().startswith(FENCE)


def classify_line(line: str, options: FormattingOptions | None = None) -> LineClass:
    """Classify one line. Rules are ordered; the first match wins.

    Header rules run before the list rules so that "1. OVERVIEW:" is read as
    a numbered section rather than an ordered list item.
    """
    opts = resolve_options(options)
    trimmed = line.strip()

    if opts.detect_code_blocks and trimmed.startswith(FENCE):
        language = trimmed[len(FENCE) :].strip()
        return LineClass(
            type=SectionType.CODE,
            content="",
            metadata={"language": language or "text"},
        )

    match = ATX_HEADER.match(trimmed)
    if match:
        title = match.group(2).strip()
        return LineClass(
            type=SectionType.HEADER,
            content=title,
            level=len(match.group(1)),
            title=title,
        )

    if opts.parse_numbered_sections:
        match = NUMBERED_SECTION.match(trimmed)
        if match:
            title = match.group(2).strip()
            return LineClass(
                type=SectionType.HEADER,
                content=match.group(3).strip() or title,
                level=2,
                title=title,
                metadata={"numbered": True, "number": int(match.group(1))},
            )

    match = BOLD_HEADER.match(trimmed)
    if match:
        title = match.group(1).strip()
        return LineClass(
            type=SectionType.HEADER,
            content=match.group(2).strip() or title,
            level=3,
            title=title,
        )

    if UNORDERED_ITEM.match(trimmed):
        return LineClass(type=SectionType.LIST, content=line)

    if ORDERED_ITEM.match(trimmed):
        return LineClass(type=SectionType.NUMBERED_LIST, content=line)

    if trimmed.startswith(">"):
        return LineClass(type=SectionType.QUOTE, content=line)

    if "|" in trimmed and len(trimmed.split("|")) >= 3:
        return LineClass(type=SectionType.TABLE, content=line)

    return LineClass(type=SectionType.TEXT, content=line)
