# src/response_kit/formatting/parser.py

import logging
from time import monotonic

from response_kit.observability import names
from response_kit.observability.base import MetricsHook, NoOpMetricsHook

from .cleaner import clean_text
from .config import FormattingOptions, resolve_options
from .models import ParsedSection
from .segmenter import segment
from .serializers import format_for_display, sections_to_plain_text

logger = logging.getLogger(__name__)


class ResponseParser:
    """Binds formatting options and a metrics hook to the parsing pipeline.

    Holds no per-parse state: every call builds a fresh segmenter, so one
    instance can be shared between callers.
    """

    def __init__(
        self,
        options: FormattingOptions | None = None,
        *,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.options = resolve_options(options)
        self.metrics_hook = metrics_hook
        logger.debug("Initialized ResponseParser with options: %s", self.options)

    def clean(self, text: str) -> str:
        start = monotonic()
        cleaned = clean_text(text, self.options)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CLEANING_DURATION, elapsed_ms)
        return cleaned

    def parse(self, text: str) -> list[ParsedSection]:
        return segment(text, self.options, metrics_hook=self.metrics_hook)

    def to_display(self, text: str) -> str:
        return format_for_display(self.parse(text))

    def to_plain_text(self, text: str) -> str:
        return sections_to_plain_text(self.parse(text))
