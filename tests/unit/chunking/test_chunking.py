import pytest

from jargon_kit.chunking.chunking import ChunkKind, assemble_chunks
from jargon_kit.jargons.defaults import html_jargon
from jargon_kit.jargons.jargon import Jargon
from jargon_kit.observability import InMemoryMetricsHook, names
from jargon_kit.text.lines import split_lines


@pytest.fixture
def html() -> Jargon:
    return html_jargon()


def _chunks(text: str, jargon: Jargon):
    return assemble_chunks(split_lines(text), jargon)


class TestAssembleChunks:
    def test_one_chunk_per_marker_line(self, outline: Jargon) -> None:
        """Each marker line starts a chunk; the rest of the line is its body."""
        chunks = _chunks("# Intro\n- Hello\n- World", outline)

        assert [c.kind for c in chunks] == [ChunkKind.MARKED] * 3
        assert [c.marker for c in chunks] == ["#", "-", "-"]
        assert [c.body for c in chunks] == ["Intro", "Hello", "World"]
        assert [c.start_line for c in chunks] == [1, 2, 3]

    def test_unmarked_lines_continue_chunk(self, outline: Jargon) -> None:
        chunks = _chunks("- Hello\nthere\nfriend", outline)

        assert len(chunks) == 1
        assert chunks[0].body == "Hello\nthere\nfriend"
        assert chunks[0].end_line == 3

    def test_blank_line_closes_chunk(self, outline: Jargon) -> None:
        chunks = _chunks("- Hello\n\nthere", outline)

        assert [c.kind for c in chunks] == [ChunkKind.MARKED, ChunkKind.TEXT]
        assert chunks[1].marker is None
        assert chunks[1].body == "there"

    def test_attribute_container_split_off(self, outline: Jargon) -> None:
        chunk = _chunks("# {id=intro .lead} Intro", outline)[0]

        assert chunk.attribute_text == "{id=intro .lead}"
        assert chunk.body == "Intro"
        assert chunk.body_lines[0].column == 20

    def test_quoted_brace_stays_in_container(self, html: Jargon) -> None:
        chunk = _chunks('. {title="a}b"} Hi', html)[0]

        assert chunk.attribute_text == '{title="a}b"}'
        assert chunk.body == "Hi"

    def test_unterminated_container_is_body(self, html: Jargon) -> None:
        chunk = _chunks('. {title="a} Hi', html)[0]

        assert chunk.attribute_text is None
        assert chunk.body == '{title="a} Hi'

    def test_marker_only_line_has_empty_body(self, outline: Jargon) -> None:
        chunk = _chunks("#", outline)[0]

        assert chunk.body_lines == ()
        assert chunk.attribute_text is None

    def test_unknown_marker_token(self, outline: Jargon) -> None:
        chunks = _chunks("# Intro\n@ who\n- Hi", outline)

        assert chunks[1].kind is ChunkKind.UNKNOWN
        assert chunks[1].marker == "@"
        assert chunks[1].body == "who"
        assert chunks[1].start_line == 2

    def test_marker_without_boundary_is_text(self, outline: Jargon) -> None:
        chunks = _chunks("#hashtag", outline)

        assert chunks[0].kind is ChunkKind.TEXT
        assert chunks[0].body == "#hashtag"

    def test_closer_line(self, html: Jargon) -> None:
        chunks = _chunks("# One\n| |\n. Two", html)

        assert chunks[1].kind is ChunkKind.CLOSER
        assert chunks[1].count == 2

    def test_indented_continuation_is_verbatim(self, html: Jargon) -> None:
        """Deeper lines join an indented chunk without marker scanning."""
        chunks = _chunks("> quoted\n  - item\n  | not a closer\nafter", html)

        assert len(chunks) == 2
        assert [line.content for line in chunks[0].body_lines] == [
            "quoted",
            "- item",
            "| not a closer",
        ]
        assert chunks[1].kind is ChunkKind.TEXT

    def test_literal_lines_are_not_scanned(self, html: Jargon) -> None:
        chunks = _chunks("` for x in xs:\n    - not a list\n# not a section\n|", html)

        assert len(chunks) == 1
        assert chunks[0].marker == "`"
        assert [line.content for line in chunks[0].body_lines] == [
            "for x in xs:",
            "- not a list",
            "# not a section",
            "|",
        ]

    def test_blank_line_ends_literal(self, html: Jargon) -> None:
        chunks = _chunks("` code\n\n- item", html)

        assert [c.marker for c in chunks] == ["`", "-"]

    def test_none_continuation_stops_at_next_line(self, html: Jargon) -> None:
        chunks = _chunks("---\nafter", html)

        assert [c.kind for c in chunks] == [ChunkKind.MARKED, ChunkKind.TEXT]

    def test_column_of_indented_marker(self, outline: Jargon) -> None:
        chunk = _chunks("   - Hello", outline)[0]

        assert chunk.column == 4
        assert chunk.body_lines[0].column == 6

    def test_records_metrics(self, outline: Jargon) -> None:
        hook = InMemoryMetricsHook()
        assemble_chunks(split_lines("# A\n- b\n- c"), outline, metrics_hook=hook)

        assert hook.count(names.CHUNKING_CHUNKS_CREATED) == 3
        assert len(hook.latencies[names.CHUNKING_DURATION]) == 1

    def test_empty_input(self, outline: Jargon) -> None:
        assert _chunks("", outline) == []
