from response_kit.formatting.config import FormattingOptions
from response_kit.formatting.models import SectionType
from response_kit.formatting.parser import ResponseParser
from response_kit.observability import names
from response_kit.observability.base import InMemoryMetricsHook


class TestResponseParser:
    def test_parse(self) -> None:
        sections = ResponseParser().parse("# Title\nHello world")

        assert [s.type for s in sections] == [SectionType.HEADER, SectionType.TEXT]

    def test_options_are_applied(self) -> None:
        parser = ResponseParser(FormattingOptions(parse_numbered_sections=False))

        sections = parser.parse("1. OVERVIEW: x")

        assert sections[0].type == SectionType.NUMBERED_LIST

    def test_calls_do_not_share_state(self) -> None:
        """A shared parser restarts ids for every input."""
        parser = ResponseParser()

        first = parser.parse("# A\nbody")
        second = parser.parse("# B\nbody")

        assert [s.id for s in first] == [0, 1]
        assert [s.id for s in second] == [0, 1]

    def test_to_display(self) -> None:
        assert ResponseParser().to_display("- a\n- b") == "- a\n- b"

    def test_to_plain_text(self) -> None:
        result = ResponseParser().to_plain_text("# Title\nHello world")

        assert result == "Title\n=====\n\nHello world"

    def test_clean_records_latency(self) -> None:
        hook = InMemoryMetricsHook()
        parser = ResponseParser(metrics_hook=hook)

        assert parser.clean("a\r\n\r\n\r\n\r\nb") == "a\n\nb"
        assert len(hook.latencies[names.CLEANING_DURATION]) == 1

    def test_parse_reports_to_hook(self) -> None:
        hook = InMemoryMetricsHook()
        parser = ResponseParser(metrics_hook=hook)

        parser.parse("one\n# two")
        parser.parse("three")

        assert hook.counters[names.SEGMENTATION_SECTIONS_CREATED] == 3
