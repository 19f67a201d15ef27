# src/response_kit/formatting/export.py

import re

WHITESPACE_RUN = re.compile(r"\s+")


def export_filename(title: str, extension: str = "txt") -> str:
    """Build a download filename from a display title.

    "AI Response" -> "ai-response.txt"
    """
    slug = WHITESPACE_RUN.sub("-", title.strip()).lower() or "response"
    return f"{slug}.{extension.lstrip('.')}"
