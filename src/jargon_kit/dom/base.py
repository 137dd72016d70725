# src/jargon_kit/dom/base.py

from typing import Any, Protocol


class DOMProvider(Protocol):
    """The document the compiler builds into.

    Design principles:
    - Write only: the compiler never reads nodes back
    - Opaque nodes: whatever the provider returns is passed back verbatim
    - Single writer: one compilation owns the tree it is building

    Text handed to `create_text_node` is already escaped for the output
    format; attribute values are raw.
    """

    def create_element(self, tag: str) -> Any: ...

    def create_text_node(self, text: str) -> Any: ...

    def append_child(self, parent: Any, child: Any) -> None: ...

    def set_attribute(self, node: Any, name: str, value: str) -> None: ...
