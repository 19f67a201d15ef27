# src/response_kit/formatting/cleaner.py

import re

from .config import FormattingOptions, resolve_options

MULTINEWLINE_PATTERN = re.compile(r"\n{3,}")
ATX_HEADER_PATTERN = re.compile(r"^#{1,6}\s+\S")
LIST_ITEM_PATTERN = re.compile(r"^(?:[-*+•]|\d+\.)\s+\S")
FENCE = "```"


def clean_text(text: str, options: FormattingOptions | None = None) -> str:
    """Normalize a raw AI response before segmentation.

    Never raises. Anything that is not a string cleans to "".
    """
    if not isinstance(text, str) or not text:
        return ""
    opts = resolve_options(options)

    cleaned = text
    if opts.normalize_line_breaks:
        cleaned = cleaned.replace("\r\n", "\n").replace("\r", "\n")

    if not opts.preserve_whitespace:
        cleaned = "\n".join(line.rstrip(" \t") for line in cleaned.split("\n"))
        cleaned = MULTINEWLINE_PATTERN.sub("\n\n", cleaned)
        cleaned = cleaned.strip()

    if opts.enhance_markdown:
        cleaned = enhance_markdown(
            cleaned, detect_code_blocks=opts.detect_code_blocks
        )

    return cleaned


def enhance_markdown(text: str, *, detect_code_blocks: bool = True) -> str:
    """Pad header lines and list runs with blank lines.

    Lines inside fenced code blocks are left alone when code detection is on.
    """
    out: list[str] = []
    in_code = False
    in_list = False

    for line in text.split("\n"):
        stripped = line.strip()

        if detect_code_blocks and stripped.startswith(FENCE):
            if in_list:
                out.append("")
                in_list = False
            in_code = not in_code
            out.append(line)
            continue

        if in_code:
            out.append(line)
            continue

        if ATX_HEADER_PATTERN.match(stripped):
            if in_list:
                in_list = False
            out.extend(["", line, ""])
            continue

        if LIST_ITEM_PATTERN.match(stripped):
            if not in_list:
                out.append("")
                in_list = True
            out.append(line)
            continue

        if in_list and stripped:
            out.append("")
        in_list = False
        out.append(line)

    enhanced = MULTINEWLINE_PATTERN.sub("\n\n", "\n".join(out))
    return enhanced.strip()
