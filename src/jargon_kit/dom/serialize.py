from jargon_kit.text.escaping import escape

from .simple import Element, Node, Text

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def serialize(node: Node) -> str:
    """Write `node` as HTML-like text.

    Text nodes are written as they are, since the compiler escapes text
    before it reaches the document. Attribute values go through the same
    idempotent `escape`.
    """
    parts: list[str] = []
    _write(node, parts)
    return "".join(parts)


def _write(node: Node, parts: list[str]) -> None:
    if isinstance(node, Text):
        parts.append(node.data)
        return
    if not isinstance(node, Element):
        raise TypeError(f"Cannot serialize {type(node).__name__}")

    attributes = "".join(
        f' {name}="{escape(value)}"' for name, value in node.attributes.items()
    )
    parts.append(f"<{node.tag}{attributes}>")
    if node.tag in VOID_TAGS and not node.children:
        return
    for child in node.children:
        _write(child, parts)
    parts.append(f"</{node.tag}>")
