"""Inline span parsing.

Inside inline text a jargon may mark spans with a sigil placed right
after its opening span delimiter. With the HTML jargon's delimiters:

    Mind the ⟨* gap⟩ and ⟨` <raw> markup⟩.

The sigil must be followed by a blank, which is dropped, or by the
closing delimiter. Spans nest, except literal and comment spans, whose
text runs verbatim to the first closing delimiter. An opening delimiter
without a declared sigil and a closing delimiter with no open span are
plain text. Spans still open when the text ends are closed there.
"""

from dataclasses import dataclass, field
from typing import Union

from jargon_kit.jargons.jargon import Jargon
from jargon_kit.jargons.models import ContentModel, InlineRule

Segment = Union[str, "Span"]


@dataclass
class Span:
    rule: InlineRule
    children: list[Segment] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(
            child if isinstance(child, str) else child.text for child in self.children
        )


def parse_spans(text: str, jargon: Jargon) -> list[Segment]:
    """Split `text` into plain strings and spans, in source order."""
    opener, closer = jargon.inline_open, jargon.inline_close
    if not jargon.inlines or not opener or not closer:
        return [text] if text else []

    root: list[Segment] = []
    stack: list[Span] = []
    index = 0
    while index < len(text):
        top = stack[-1] if stack else None
        children = top.children if top is not None else root

        if top is not None and top.rule.content is not ContentModel.INLINE:
            close_at = text.find(closer, index)
            if close_at == -1:
                close_at = len(text)
            _add_text(children, text[index:close_at])
            stack.pop()
            index = close_at + len(closer)
            continue

        if top is not None and text.startswith(closer, index):
            stack.pop()
            index += len(closer)
            continue

        if text.startswith(opener, index):
            match = jargon.match_inline(text, index + len(opener))
            if match is None:
                _add_text(children, opener)
                index += len(opener)
                continue
            span = Span(jargon.inlines[match.marker])
            children.append(span)
            stack.append(span)
            index = match.end
            if index < len(text) and text[index] in " \t":
                index += 1
            continue

        stop = _next_delimiter(text, index + 1, opener, closer)
        _add_text(children, text[index:stop])
        index = stop
    return root


def _add_text(children: list[Segment], text: str) -> None:
    if not text:
        return
    if children and isinstance(children[-1], str):
        children[-1] += text
    else:
        children.append(text)


def _next_delimiter(text: str, start: int, *delimiters: str) -> int:
    found = [text.find(delimiter, start) for delimiter in delimiters]
    return min((index for index in found if index != -1), default=len(text))
