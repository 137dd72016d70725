from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class MarkerMatch:
    marker: str
    end: int


class MarkerTrie:
    """Character trie answering "which markers prefix this text?".

    Built once per jargon; lookups walk the text a single time and yield
    candidates longest first, which is what lets a two-character marker
    win over a one-character marker that prefixes it.
    """

    _END = object()

    def __init__(self, markers: Iterable[str] = ()) -> None:
        self._root: dict = {}
        self._size = 0
        for marker in markers:
            self.add(marker)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, marker: str) -> bool:
        node = self._root
        for char in marker:
            node = node.get(char)
            if node is None:
                return False
        return self._END in node

    def add(self, marker: str) -> None:
        if not marker:
            raise ValueError("markers must not be empty")
        node = self._root
        for char in marker:
            node = node.setdefault(char, {})
        if self._END not in node:
            self._size += 1
        node[self._END] = marker

    def prefixes(self, text: str, start: int = 0) -> Iterator[MarkerMatch]:
        """Yield every marker that begins `text` at `start`, longest first."""
        found = []
        node = self._root
        for index in range(start, len(text)):
            node = node.get(text[index])
            if node is None:
                break
            if self._END in node:
                found.append(MarkerMatch(node[self._END], index + 1))
        return reversed(found)

    def longest(self, text: str, start: int = 0) -> MarkerMatch | None:
        return next(iter(self.prefixes(text, start)), None)
