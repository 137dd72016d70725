from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from time import monotonic

from jargon_kit.attributes.parser import container_end
from jargon_kit.jargons.jargon import Jargon
from jargon_kit.jargons.models import ContentModel, Continuation, Rule
from jargon_kit.observability import names
from jargon_kit.observability.base import MetricsHook, NoOpMetricsHook
from jargon_kit.text.lines import Line


class ChunkKind(str, Enum):
    MARKED = "marked"
    UNKNOWN = "unknown"
    TEXT = "text"
    CLOSER = "closer"


@dataclass(frozen=True)
class Chunk:
    kind: ChunkKind
    marker: str | None
    lines: tuple[Line, ...]
    attribute_text: str | None = None
    body_lines: tuple[Line, ...] = ()
    count: int = 0

    @property
    def start_line(self) -> int:
        return self.lines[0].number

    @property
    def end_line(self) -> int:
        return self.lines[-1].number

    @property
    def column(self) -> int:
        return self.lines[0].column

    @property
    def body(self) -> str:
        return "\n".join(line.content for line in self.body_lines)


def assemble_chunks(
    lines: Iterable[Line],
    jargon: Jargon,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    start = monotonic()
    chunks: list[Chunk] = []
    builder: _ChunkBuilder | None = None

    def close() -> None:
        nonlocal builder
        if builder is not None:
            chunks.append(builder.build())
            builder = None

    for line in lines:
        if line.is_blank:
            close()
            continue

        if builder is not None and builder.takes_indented(line):
            builder.append(line)
            continue

        if builder is not None and builder.verbatim:
            # Open literal bodies take every line up to the next blank one.
            builder.append(line)
            continue

        count = jargon.closer_count(line.content)
        if count:
            close()
            chunks.append(Chunk(kind=ChunkKind.CLOSER, marker=None, lines=(line,), count=count))
            continue

        match = jargon.match_marker(line.content)
        if match is not None:
            close()
            builder = _ChunkBuilder.for_marker(line, match.marker, match.end, jargon)
            continue

        token = jargon.match_token(line.content)
        if token is not None:
            close()
            builder = _ChunkBuilder(
                kind=ChunkKind.UNKNOWN,
                marker=token,
                first=line,
                rule=_rule(jargon, None),
                body=_remainder(line, len(token)),
            )
            continue

        if builder is not None and builder.continuation is Continuation.LINES:
            builder.append(line)
            continue

        close()
        builder = _ChunkBuilder(
            kind=ChunkKind.TEXT,
            marker=None,
            first=line,
            rule=_rule(jargon, None),
            body=[line],
        )

    close()

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    return chunks


class _ChunkBuilder:
    def __init__(
        self,
        *,
        kind: ChunkKind,
        marker: str | None,
        first: Line,
        rule: Rule | None,
        body: list[Line],
        attribute_text: str | None = None,
    ) -> None:
        self.kind = kind
        self.marker = marker
        self.lines = [first]
        self.continuation = rule.continuation if rule else Continuation.LINES
        self.verbatim = (
            kind is ChunkKind.MARKED
            and rule is not None
            and rule.content is ContentModel.LITERAL
            and self.continuation is Continuation.LINES
        )
        self.body = body
        self.attribute_text = attribute_text

    @classmethod
    def for_marker(
        cls, line: Line, marker: str, end: int, jargon: Jargon
    ) -> "_ChunkBuilder":
        text = line.content
        offset = _skip_blanks(text, end)
        attribute_text = None
        if offset < len(text) and text[offset] == "{":
            close_at = container_end(text, offset)
            if close_at != -1:
                attribute_text = text[offset : close_at + 1]
                offset = close_at + 1
        return cls(
            kind=ChunkKind.MARKED,
            marker=marker,
            first=line,
            rule=_rule(jargon, marker),
            body=_remainder(line, offset),
            attribute_text=attribute_text,
        )

    def takes_indented(self, line: Line) -> bool:
        return (
            self.continuation is Continuation.INDENTED
            and line.column > self.lines[0].column
        )

    def append(self, line: Line) -> None:
        self.lines.append(line)
        self.body.append(line)

    def build(self) -> Chunk:
        return Chunk(
            kind=self.kind,
            marker=self.marker,
            lines=tuple(self.lines),
            attribute_text=self.attribute_text,
            body_lines=tuple(self.body),
        )


def _rule(jargon: Jargon, marker: str | None) -> Rule | None:
    rule = jargon.rules.get(marker) if marker is not None else None
    return rule if rule is not None else jargon.catch_all


def _skip_blanks(text: str, index: int) -> int:
    while index < len(text) and text[index] in " \t":
        index += 1
    return index


def _remainder(line: Line, offset: int) -> list[Line]:
    offset = _skip_blanks(line.content, offset)
    content = line.content[offset:]
    return [line.shifted(offset, content)] if content else []
