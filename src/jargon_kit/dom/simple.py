# src/jargon_kit/dom/simple.py

import weakref
from collections.abc import Iterator


class Node:
    def __init__(self) -> None:
        self._parent: weakref.ReferenceType | None = None

    @property
    def parent(self) -> "Element | None":
        return self._parent() if self._parent is not None else None

    @property
    def text_content(self) -> str:
        raise NotImplementedError


class Text(Node):
    def __init__(self, data: str) -> None:
        super().__init__()
        self.data = data

    def __repr__(self) -> str:
        return f"Text({self.data!r})"

    @property
    def text_content(self) -> str:
        return self.data


class Element(Node):
    def __init__(self, tag: str) -> None:
        super().__init__()
        self.tag = tag
        self.attributes: dict[str, str] = {}
        self.children: list[Node] = []

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, children={len(self.children)})"

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    @property
    def elements(self) -> list["Element"]:
        return [child for child in self.children if isinstance(child, Element)]

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def iter(self, tag: str | None = None) -> Iterator["Element"]:
        """Walk this element and its descendants in document order."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.elements:
            yield from child.iter(tag)

    def find_all(self, tag: str) -> list["Element"]:
        return [element for element in self.iter(tag) if element is not self]


class SimpleDocument:
    """Minimal in-memory `DOMProvider`.

    Parents are held weakly; the caller keeps the tree alive through
    the root element.
    """

    def create_element(self, tag: str) -> Element:
        return Element(tag)

    def create_text_node(self, text: str) -> Text:
        return Text(text)

    def append_child(self, parent: Element, child: Node) -> None:
        if child.parent is not None:
            child.parent.children.remove(child)
        child._parent = weakref.ref(parent)
        parent.children.append(child)

    def set_attribute(self, node: Element, name: str, value: str) -> None:
        node.attributes[name] = value
