from .base import DOMProvider
from .serialize import VOID_TAGS, serialize
from .simple import Element, Node, SimpleDocument, Text

__all__ = [
    "DOMProvider",
    "Element",
    "Node",
    "SimpleDocument",
    "Text",
    "VOID_TAGS",
    "serialize",
]
