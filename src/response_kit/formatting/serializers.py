# src/response_kit/formatting/serializers.py

import re
from collections.abc import Iterable

from .models import ParsedSection, SectionType

QUOTE_MARKER_PATTERN = re.compile(r"^\s*>\s?", re.MULTILINE)
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")


def format_for_display(sections: Iterable[ParsedSection]) -> str:
    """Re-emit sections as markdown-like text.

    Lossy: spacing is renormalized and headers keep only their title, but
    re-segmenting the result yields the same section types and titles.
    """
    parts: list[str] = []
    for section in sections:
        if section.type is SectionType.HEADER:
            parts.append(_display_header(section) + "\n")
        elif section.type is SectionType.CODE:
            language = section.metadata.get("language") or ""
            parts.append(f"```{language}\n{section.content}\n```\n")
        elif section.type is SectionType.TEXT:
            parts.append(section.content + "\n\n")
        else:
            parts.append(section.content + "\n")
    return "".join(parts).strip()


def sections_to_plain_text(sections: Iterable[ParsedSection]) -> str:
    """Render sections as plain text for export.

    Drops header markers, code fences, quote markers and bold markers. List
    bullets and table pipes are kept since they still read as plain text.
    """
    blocks: list[str] = []
    for section in sections:
        if section.type is SectionType.HEADER:
            title = section.title or section.content
            block = f"{title}\n{'=' * len(title)}"
            body = section.content.strip()
            if body and body != title:
                block += f"\n\n{_strip_inline(body)}"
        elif section.type is SectionType.CODE:
            block = section.content
        elif section.type is SectionType.QUOTE:
            block = _strip_inline(QUOTE_MARKER_PATTERN.sub("", section.content))
        else:
            block = _strip_inline(section.content)
        blocks.append(block)
    return "\n\n".join(blocks).strip()


def _display_header(section: ParsedSection) -> str:
    prefix = "#" * min(section.level or 2, 6)
    return f"{prefix} {section.title or section.content}"


def _strip_inline(text: str) -> str:
    return BOLD_PATTERN.sub(r"\1", text)
