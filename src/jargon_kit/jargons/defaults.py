# src/jargon_kit/jargons/defaults.py

"""The built-in HTML jargon.

Sections sit at depth 1 and take a level-two heading from the rest of
their marker line. Blocks sit at depth 2; unmarked paragraphs fall
through to the catch-all. A line of `|` closes open sections. Inline
text takes spans such as `⟨* emphasis⟩` and `⟨` <raw>⟩`.
"""

from .jargon import Jargon, build_jargon
from .models import JargonDefinition
from .registry import JargonRegistry

HTML_JARGON_NAME = "html"

_OPEN = {"open": True}


def _section(marker: str, tag: str) -> dict:
    return {
        "marker": marker,
        "tag": tag,
        "depth": 1,
        "content": "block",
        "heading": "h2",
        "attributes": _OPEN,
    }


_SPANS = {
    "!": "strong",
    '"': "q",
    "#": "b",
    "$": "var",
    "%": "mark",
    "'": "cite",
    "*": "em",
    "+": "ins",
    ",": "sub",
    "-": "del",
    "/": "i",
    ":": "span",
    "<": "samp",
    "=": "s",
    ">": "kbd",
    "?": "dfn",
    "[": "small",
    "]": "abbr",
    "^": "sup",
    "_": "u",
    "~": "code",
}


def _item(marker: str, tag: str, wrapper: str) -> dict:
    return {
        "marker": marker,
        "tag": tag,
        "depth": 2,
        "wrapper": wrapper,
        "attributes": _OPEN,
    }


HTML_DEFINITION = JargonDefinition(
    name=HTML_JARGON_NAME,
    root="body",
    closer="|",
    attribute_sigils={
        ".": "class",
        "#": "id",
        "!": "href",
        "&": "src",
        "/": "title",
        "=": "role",
        "@": "lang",
        "`": "type",
    },
    inline_open="&#x27E8;",
    inline_close="&#x27E9;",
    catch_all={"tag": "p", "depth": 2, "attributes": _OPEN},
    rules=[
        _section("#", "section"),
        _section("@", "article"),
        _section("%", "nav"),
        _section("^", "header"),
        _section("_", "footer"),
        _section("<", "aside"),
        {"marker": ".", "tag": "p", "depth": 2, "attributes": _OPEN},
        {
            "marker": ">",
            "tag": "blockquote",
            "depth": 2,
            "content": "block",
            "continuation": "indented",
            "attributes": _OPEN,
        },
        {
            "marker": "[",
            "tag": "figure",
            "depth": 2,
            "content": "block",
            "continuation": "indented",
            "attributes": _OPEN,
        },
        {"marker": "]", "tag": "address", "depth": 2, "attributes": _OPEN},
        _item("-", "li", "ul"),
        _item("+", "li", "ol"),
        _item("?", "dt", "dl"),
        _item(",", "dd", "dl"),
        {
            "marker": "`",
            "tag": "pre",
            "depth": 2,
            "content": "literal",
            "attributes": _OPEN,
        },
        {"marker": ";", "depth": 2, "content": "comment"},
        {
            "marker": "---",
            "tag": "hr",
            "depth": 2,
            "content": "void",
            "continuation": "none",
            "attributes": _OPEN,
        },
        {
            "marker": "!",
            "tag": "img",
            "depth": 2,
            "content": "void",
            "continuation": "none",
            "text_to": ["alt"],
            "attributes": {"allowed": ["src", "title", "class", "id"]},
        },
    ],
    inlines=[
        *({"sigil": sigil, "tag": tag} for sigil, tag in _SPANS.items()),
        {"sigil": "&", "tag": "img", "text_to": ["alt", "title"]},
        {"sigil": "@", "tag": "a", "text_from": "href"},
        {"sigil": ";", "content": "comment"},
        {"sigil": "`", "content": "literal"},
    ],
)


def html_jargon() -> Jargon:
    return build_jargon(HTML_DEFINITION)


def default_registry() -> JargonRegistry:
    """A registry holding the built-in jargons."""
    registry = JargonRegistry()
    registry.register(HTML_DEFINITION)
    return registry
