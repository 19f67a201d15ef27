from pathlib import Path

import pytest
from pydantic import ValidationError

from response_kit.formatting.config import FormattingOptions, load_options


class TestFormattingOptions:
    def test_defaults(self) -> None:
        options = FormattingOptions()

        assert options.preserve_whitespace is False
        assert options.normalize_line_breaks is True
        assert options.trim_sections is True
        assert options.enhance_markdown is True
        assert options.detect_code_blocks is True
        assert options.parse_numbered_sections is True

    def test_is_frozen(self) -> None:
        options = FormattingOptions()

        with pytest.raises(ValidationError):
            options.trim_sections = False  # type: ignore

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            FormattingOptions(unknown_flag=True)  # type: ignore[call-arg]


class TestLoadOptions:
    def test_loads_partial_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "formatting.yaml"
        path.write_text("enhance_markdown: false\nparse_numbered_sections: false\n")

        options = load_options(path)

        assert options.enhance_markdown is False
        assert options.parse_numbered_sections is False
        assert options.trim_sections is True

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "formatting.yaml"
        path.write_text("preserve_whitespace: true\n")

        assert load_options(str(path)).preserve_whitespace is True

    def test_empty_file_yields_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_options(path) == FormattingOptions()

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("colorize: true\n")

        with pytest.raises(ValidationError):
            load_options(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_options(tmp_path / "missing.yaml")
