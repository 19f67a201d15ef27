# src/response_kit/formatting/models.py

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class SectionType(str, Enum):
    """Structural type of a parsed section."""

    HEADER = "header"
    TEXT = "text"
    LIST = "list"
    NUMBERED_LIST = "numbered-list"
    CODE = "code"
    QUOTE = "quote"
    TABLE = "table"


# Consecutive lines of these types merge into a single section.
RUN_TYPES = frozenset(
    {
        SectionType.TEXT,
        SectionType.LIST,
        SectionType.NUMBERED_LIST,
        SectionType.QUOTE,
        SectionType.TABLE,
    }
)


@dataclass(frozen=True)
class ParsedSection:
    """A finalized section of an AI response.

    Immutable, metadata included: it is exposed as a read-only mapping.
    """

    id: int
    type: SectionType
    content: str
    raw_content: str
    level: int | None = None  # Headers only (1-6)
    title: str | None = None  # Headers only
    metadata: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "content": self.content,
            "raw_content": self.raw_content,
            "metadata": dict(self.metadata),
        }
        if self.type is SectionType.HEADER:
            data["level"] = self.level
            data["title"] = self.title
        return data
