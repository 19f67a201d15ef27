# src/response_kit/formatting/segmenter.py

"""Line-oriented segmentation of cleaned AI responses.

The segmenter is a three-state machine:

- IDLE: no section is open.
- OPEN: a section is open and may absorb same-type lines.
- IN_CODE_BLOCK: a fenced block is open and absorbs every line verbatim
  until the next fence or end of input.

State is owned by a ``Segmenter`` instance, one per input string.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from time import monotonic
from typing import Any

from response_kit.observability import names
from response_kit.observability.base import MetricsHook, NoOpMetricsHook

from .classifier import LineClass, classify_line, is_fence
from .cleaner import clean_text
from .config import FormattingOptions, resolve_options
from .models import RUN_TYPES, ParsedSection, SectionType

logger = logging.getLogger(__name__)


class SegmenterState(str, Enum):
    IDLE = "idle"
    OPEN = "open"
    IN_CODE_BLOCK = "in_code_block"


def continues_section(open_type: SectionType | None, line_type: SectionType) -> bool:
    """True when a line of ``line_type`` extends an open section of ``open_type``.

    Only same-type runs of text, lists, quotes and tables merge. Any change of
    type is a boundary, and headers never absorb anything.
    """
    return open_type is not None and open_type == line_type and line_type in RUN_TYPES


@dataclass
class _OpenSection:
    type: SectionType
    content: str
    raw_lines: list[str]
    level: int | None = None
    title: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    code_lines: list[str] = field(default_factory=list)

    @classmethod
    def from_line(cls, line: str, line_class: LineClass) -> "_OpenSection":
        return cls(
            type=line_class.type,
            content=line_class.content,
            raw_lines=[line],
            level=line_class.level,
            title=line_class.title,
            metadata=dict(line_class.metadata),
        )


class Segmenter:
    """Consumes cleaned lines and emits finalized sections in order."""

    def __init__(self, options: FormattingOptions | None = None) -> None:
        self.options = resolve_options(options)
        self.sections: list[ParsedSection] = []
        self.state = SegmenterState.IDLE
        self._current: _OpenSection | None = None
        self._counter = 0

    def feed(self, line: str) -> None:
        if self.state is SegmenterState.IN_CODE_BLOCK:
            self._feed_code(line)
            return

        if not line.strip():
            if self._current is not None:
                self._current.content += "\n"
                self._current.raw_lines.append(line)
            return

        line_class = classify_line(line, self.options)
        current = self._current

        if current is not None and continues_section(current.type, line_class.type):
            current.content += "\n" + line_class.content
            current.raw_lines.append(line)
            return

        self._finalize()
        self._current = _OpenSection.from_line(line, line_class)
        if line_class.type is SectionType.CODE:
            self.state = SegmenterState.IN_CODE_BLOCK
        else:
            self.state = SegmenterState.OPEN

    def finish(self) -> list[ParsedSection]:
        if self.state is SegmenterState.IN_CODE_BLOCK:
            logger.debug("Unterminated code fence, closing at end of input")
        self._finalize()
        return list(self.sections)

    def _feed_code(self, line: str) -> None:
        current = self._current
        if current is None:
            return
        current.raw_lines.append(line)
        if is_fence(line):
            self._finalize()
        else:
            current.code_lines.append(line)

    def _finalize(self) -> None:
        current = self._current
        self._current = None
        self.state = SegmenterState.IDLE
        if current is None:
            return

        if current.type is SectionType.CODE:
            content = "\n".join(current.code_lines)
        else:
            if not current.content.strip():
                return
            content = current.content
            if self.options.trim_sections:
                content = content.strip()

        self.sections.append(
            ParsedSection(
                id=self._counter,
                type=current.type,
                content=content,
                raw_content="\n".join(current.raw_lines),
                level=current.level,
                title=current.title,
                metadata=current.metadata,
            )
        )
        self._counter += 1


def segment(
    text: str,
    options: FormattingOptions | None = None,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[ParsedSection]:
    """Clean ``text`` and split it into typed sections.

    Never raises for string input; non-string input yields an empty list.
    """
    start = monotonic()
    opts = resolve_options(options)
    cleaned = clean_text(text, opts)
    if not cleaned:
        return []

    lines = cleaned.split("\n")
    segmenter = Segmenter(opts)
    for line in lines:
        segmenter.feed(line)
    sections = segmenter.finish()

    logger.debug("Segmented %d lines into %d sections", len(lines), len(sections))

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SEGMENTATION_DURATION, elapsed_ms)
    metrics_hook.increment(names.SEGMENTATION_SECTIONS_CREATED, len(sections))
    metrics_hook.record_gauge(names.SEGMENTATION_INPUT_LINES, len(lines))
    return sections
