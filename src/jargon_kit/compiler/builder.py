"""Rule matching and element construction.

The builder walks the chunks of one scope in source order. For each
chunk it resolves the rule, validates everything that could fail, and
only then touches the tree, so a chunk skipped in collect-all mode
leaves no partial element behind.
"""

import logging
from collections.abc import Sequence

from jargon_kit.attributes.parser import merge_attributes, parse_attributes
from jargon_kit.chunking.chunking import Chunk, ChunkKind, assemble_chunks
from jargon_kit.errors import (
    ChunkError,
    InvalidAttributeError,
    UnexpectedContentError,
)
from jargon_kit.inlines.spans import Segment, parse_spans
from jargon_kit.jargons.models import ContentModel, Rule
from jargon_kit.paths.path import PathEntry, PathStack, Placement, decide_placement
from jargon_kit.text.escaping import escape, normalize_whitespace, process_text
from jargon_kit.text.lines import Line

from .context import CompilationContext

logger = logging.getLogger(__name__)


class ElementBuilder:
    def __init__(self, context: CompilationContext) -> None:
        self.context = context
        self.jargon = context.jargon
        self.document = context.document
        self.reporter = context.reporter
        self.policy = context.config.duplicate_policy
        self.chunks = 0

    def compile_lines(self, lines: Sequence[Line], stack: PathStack) -> int:
        """Build every chunk in `lines` under `stack`.

        Returns the number of chunks handled in this scope. Chunk errors
        go to the reporter, which either raises or records them.
        """
        chunks = assemble_chunks(
            lines, self.jargon, metrics_hook=self.context.metrics_hook
        )
        for chunk in chunks:
            self.chunks += 1
            try:
                self.build(chunk, stack)
            except ChunkError as error:
                if error.line is None:
                    error.line = chunk.start_line
                if error.column is None:
                    error.column = chunk.column
                self.reporter.report(error)
        return len(chunks)

    def build(self, chunk: Chunk, stack: PathStack) -> None:
        if chunk.kind is ChunkKind.CLOSER:
            stack.close(chunk.count)
            return

        marker = None if chunk.kind is ChunkKind.TEXT else chunk.marker
        rule = self.jargon.resolve(marker, line=chunk.start_line)
        if rule.content is ContentModel.COMMENT:
            logger.debug("Dropping comment at line %d", chunk.start_line)
            return

        # The catch-all keeps an undeclared marker as part of its text.
        body = chunk.lines if chunk.kind is ChunkKind.UNKNOWN else chunk.body_lines

        placement = decide_placement(stack.top, rule)
        existing = stack.top.attributes if placement is Placement.ATTACH else {}
        attributes = self._attributes(chunk, rule, body, existing)
        if rule.content is ContentModel.VOID and body and not rule.text_to:
            raise UnexpectedContentError(
                f"'{rule.key}' takes no content",
                line=body[0].number,
                column=body[0].column,
                marker=rule.marker or None,
            )

        placement, parent = stack.place(
            rule, line=chunk.start_line, column=chunk.column
        )
        if placement is Placement.ATTACH:
            entry = parent
            for name, value in attributes.items():
                if entry.attributes.get(name) != value:
                    self.document.set_attribute(entry.node, name, value)
            entry.attributes = attributes
        else:
            node = self.document.create_element(rule.tag)
            for name, value in attributes.items():
                self.document.set_attribute(node, name, value)
            self._attach(parent, rule, node)
            entry = stack.push(rule, node)
            entry.attributes = attributes

        if rule.text_to:
            return
        if rule.content is ContentModel.BLOCK:
            self._fill_block(entry, rule, body)
        elif rule.content is ContentModel.LITERAL:
            self._append_text(entry, process_text(body, literal=True), "\n")
        elif rule.content is ContentModel.INLINE:
            self._append_inline(entry, body, " ")

    def _attributes(
        self,
        chunk: Chunk,
        rule: Rule,
        body: Sequence[Line],
        existing: dict[str, str],
    ) -> dict[str, str]:
        layers = [existing.items()] if existing else [rule.defaults.items()]
        if rule.text_to and body:
            text = normalize_whitespace(line.content for line in body)
            layers.append([(name, text) for name in rule.text_to])
        if chunk.attribute_text is not None:
            parsed = parse_attributes(
                chunk.attribute_text,
                rule=rule,
                jargon=self.jargon,
                policy=self.policy,
                line=chunk.start_line,
                column=chunk.column,
            )
            layers.append(parsed.items())
        attributes = merge_attributes(layers, self.policy)

        for name in rule.attributes.required:
            if name not in attributes:
                raise InvalidAttributeError(
                    f"'{rule.key}' requires attribute '{name}'",
                    line=chunk.start_line,
                    column=chunk.column,
                    marker=rule.marker or None,
                    attribute=name,
                )
        return attributes

    def _attach(self, parent: PathEntry, rule: Rule, node) -> None:
        if rule.wrapper is None:
            parent.wrapper = None
            self.document.append_child(parent.node, node)
            return
        if parent.wrapper is None or parent.wrapper[0] != rule.wrapper:
            wrapper = self.document.create_element(rule.wrapper)
            self.document.append_child(parent.node, wrapper)
            parent.wrapper = (rule.wrapper, wrapper)
        self.document.append_child(parent.wrapper[1], node)

    def _append_text(self, entry: PathEntry, text: str, separator: str) -> None:
        if not text:
            return
        if entry.has_text:
            text = separator + text
        self.document.append_child(entry.node, self.document.create_text_node(text))
        entry.has_text = True
        entry.wrapper = None

    def _append_inline(
        self, entry: PathEntry, body: Sequence[Line], separator: str
    ) -> None:
        text = normalize_whitespace(line.content for line in body)
        if not text:
            return
        if entry.has_text:
            text = separator + text
        self._emit(entry.node, parse_spans(text, self.jargon))
        entry.has_text = True
        entry.wrapper = None

    def _emit(self, parent, segments: Sequence[Segment]) -> None:
        """Append plain text and span elements under `parent`."""
        for segment in segments:
            if isinstance(segment, str):
                self._append_raw(parent, escape(segment))
                continue
            rule = segment.rule
            if rule.content is ContentModel.COMMENT:
                continue
            text = segment.text
            if rule.tag is None:
                # Untagged literal spans contribute their text only.
                self._append_raw(parent, text)
                continue

            node = self.document.create_element(rule.tag)
            layers = [rule.defaults.items(), [(name, text) for name in rule.text_to]]
            if rule.text_from is not None:
                layers.append([(rule.text_from, text)])
            for name, value in merge_attributes(layers, self.policy).items():
                self.document.set_attribute(node, name, value)
            if rule.content is ContentModel.LITERAL:
                self._append_raw(node, text)
            elif not rule.text_to:
                self._emit(node, segment.children)
            self.document.append_child(parent, node)

    def _append_raw(self, parent, text: str) -> None:
        if text:
            self.document.append_child(parent, self.document.create_text_node(text))

    def _fill_block(self, entry: PathEntry, rule: Rule, body: Sequence[Line]) -> None:
        lines = list(body)
        if lines and self.jargon.match_marker(lines[0].content) is None:
            first = lines.pop(0)
            if rule.heading is not None:
                heading = self.document.create_element(rule.heading)
                text = normalize_whitespace([first.content])
                self._emit(heading, parse_spans(text, self.jargon))
                self.document.append_child(entry.node, heading)
            else:
                self._append_inline(entry, [first], " ")
        if lines:
            self.compile_lines(lines, PathStack(entry.node, root_rule=rule))
