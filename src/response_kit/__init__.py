# Formatting
from .formatting import (
    FormattingOptions,
    ParsedSection,
    ResponseParser,
    SectionType,
    classify_line,
    clean_text,
    count_by_type,
    export_filename,
    extract_sections,
    format_for_display,
    load_options,
    sections_to_plain_text,
    segment,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    # Formatting
    "FormattingOptions",
    "ParsedSection",
    "ResponseParser",
    "SectionType",
    "classify_line",
    "clean_text",
    "count_by_type",
    "export_filename",
    "extract_sections",
    "format_for_display",
    "load_options",
    "sections_to_plain_text",
    "segment",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
]
