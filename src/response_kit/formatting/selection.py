# src/response_kit/formatting/selection.py

import re
from collections import Counter
from collections.abc import Iterable

from .models import ParsedSection, SectionType


def extract_sections(
    sections: Iterable[ParsedSection],
    *,
    section_type: SectionType | None = None,
    title: str | None = None,
    title_pattern: str | re.Pattern[str] | None = None,
) -> list[ParsedSection]:
    """Select sections matching every given criterion.

    Sections without a title never match ``title`` or ``title_pattern``.
    """
    pattern = re.compile(title_pattern) if isinstance(title_pattern, str) else title_pattern

    selected = []
    for section in sections:
        if section_type is not None and section.type != section_type:
            continue
        if title is not None and section.title != title:
            continue
        if pattern is not None and (
            section.title is None or not pattern.search(section.title)
        ):
            continue
        selected.append(section)
    return selected


def count_by_type(sections: Iterable[ParsedSection]) -> dict[SectionType, int]:
    return dict(Counter(section.type for section in sections))
