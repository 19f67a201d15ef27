import pytest

from response_kit.formatting.models import RUN_TYPES, ParsedSection, SectionType
from response_kit.formatting.segmenter import segment


class TestSectionType:
    def test_values_are_strings(self) -> None:
        assert SectionType.CODE == "code"
        assert SectionType("numbered-list") is SectionType.NUMBERED_LIST

    def test_headers_and_code_never_run(self) -> None:
        assert SectionType.HEADER not in RUN_TYPES
        assert SectionType.CODE not in RUN_TYPES


class TestParsedSection:
    def test_is_frozen(self) -> None:
        section = ParsedSection(
            id=0, type=SectionType.TEXT, content="hi", raw_content="hi"
        )

        with pytest.raises(AttributeError):
            section.content = "modified"  # type: ignore

    def test_header_to_dict(self) -> None:
        section = ParsedSection(
            id=3,
            type=SectionType.HEADER,
            content="intro",
            raw_content="1. OVERVIEW: intro",
            level=2,
            title="OVERVIEW",
            metadata={"numbered": True, "number": 1},
        )

        assert section.to_dict() == {
            "id": 3,
            "type": "header",
            "content": "intro",
            "raw_content": "1. OVERVIEW: intro",
            "metadata": {"numbered": True, "number": 1},
            "level": 2,
            "title": "OVERVIEW",
        }

    def test_non_header_to_dict_omits_level_and_title(self) -> None:
        section = ParsedSection(
            id=0,
            type=SectionType.CODE,
            content="ls",
            raw_content="```sh\nls\n```",
            metadata={"language": "sh"},
        )

        data = section.to_dict()

        assert data["type"] == "code"
        assert "level" not in data
        assert "title" not in data

    def test_metadata_is_read_only(self) -> None:
        section = segment("```js\nx\n```")[0]

        with pytest.raises(TypeError):
            section.metadata["language"] = "py"  # type: ignore[index]

        assert section.metadata["language"] == "js"

    def test_metadata_is_copied_from_caller(self) -> None:
        metadata = {"language": "sh"}
        section = ParsedSection(
            id=0,
            type=SectionType.CODE,
            content="ls",
            raw_content="ls",
            metadata=metadata,
        )

        metadata["language"] = "py"

        assert section.metadata == {"language": "sh"}

    def test_to_dict_returns_mutable_copy(self) -> None:
        section = segment("```js\nx\n```")[0]

        data = section.to_dict()
        data["metadata"]["language"] = "py"

        assert section.metadata["language"] == "js"

    def test_sections_are_hashable(self) -> None:
        sections = segment("# Title\n```js\nx\n```")

        assert len({hash(s) for s in sections}) == 2
