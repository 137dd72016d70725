import re
from collections.abc import Iterable

from .lines import Line

# An ampersand that already starts a reference is left alone, which is
# what keeps `escape` idempotent.
_BARE_AMPERSAND = re.compile(r"&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)")
_RESERVED = {"<": "&lt;", ">": "&gt;", '"': "&quot;"}
_RESERVED_RE = re.compile('[<>"]')
_REFERENCE = re.compile(r"&#(?:([0-9]+)|[xX]([0-9A-Fa-f]+));")
_WHITESPACE_RUN = re.compile(r"[ \t]+")


def escape(text: str) -> str:
    """Escape characters reserved by the output format.

    `escape(escape(x)) == escape(x)` for every `x`.
    """
    text = _BARE_AMPERSAND.sub("&amp;", text)
    return _RESERVED_RE.sub(lambda match: _RESERVED[match.group(0)], text)


def decode_references(text: str) -> str:
    """Replace decimal and hexadecimal character references with characters."""

    def _decode(match: re.Match) -> str:
        decimal, hexadecimal = match.groups()
        codepoint = int(decimal) if decimal is not None else int(hexadecimal, 16)
        if not 0 < codepoint <= 0x10FFFF:
            return match.group(0)
        return chr(codepoint)

    return _REFERENCE.sub(_decode, text)


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Join lines with single spaces and collapse runs of blanks."""
    joined = " ".join(line.strip() for line in lines if line.strip())
    return _WHITESPACE_RUN.sub(" ", joined)


def literal_text(lines: Iterable[Line]) -> str:
    """Join lines verbatim, keeping the indentation of continuation lines."""
    return "\n".join(line.indent + line.content for line in lines)


def process_text(lines: Iterable[Line], *, literal: bool = False) -> str:
    """Turn body lines into text ready to become a text node.

    Literal spans are passed through unescaped; everything else is
    whitespace-normalized and escaped.
    """
    if literal:
        return literal_text(lines)
    return escape(normalize_whitespace(line.content for line in lines))
