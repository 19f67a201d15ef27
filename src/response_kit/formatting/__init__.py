from .classifier import LineClass, classify_line
from .cleaner import clean_text, enhance_markdown
from .config import FormattingOptions, load_options
from .export import export_filename
from .models import ParsedSection, SectionType
from .parser import ResponseParser
from .segmenter import Segmenter, SegmenterState, continues_section, segment
from .selection import count_by_type, extract_sections
from .serializers import format_for_display, sections_to_plain_text

__all__ = [
    "FormattingOptions",
    "LineClass",
    "ParsedSection",
    "ResponseParser",
    "SectionType",
    "Segmenter",
    "SegmenterState",
    "classify_line",
    "clean_text",
    "continues_section",
    "count_by_type",
    "enhance_markdown",
    "export_filename",
    "extract_sections",
    "format_for_display",
    "load_options",
    "sections_to_plain_text",
    "segment",
]
