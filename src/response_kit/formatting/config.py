# src/response_kit/formatting/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class FormattingOptions(BaseModel):
    """Flags controlling cleaning and segmentation.

    Immutable. Explicit. No magic defaults from environment.
    """

    preserve_whitespace: bool = False
    normalize_line_breaks: bool = True
    trim_sections: bool = True
    enhance_markdown: bool = True
    detect_code_blocks: bool = True
    parse_numbered_sections: bool = True

    class Config:
        extra = "forbid"
        frozen = True


DEFAULT_OPTIONS = FormattingOptions()


def resolve_options(options: FormattingOptions | None) -> FormattingOptions:
    return DEFAULT_OPTIONS if options is None else options


def load_options(path: str | Path) -> FormattingOptions:
    """Load formatting options from a YAML mapping.

    Missing keys keep their defaults; unknown keys are rejected.
    """
    logger.info("Loading formatting options from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return FormattingOptions()
    return FormattingOptions(**data)
