# src/jargon_kit/paths/path.py

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from jargon_kit.errors import InvalidNestingError
from jargon_kit.jargons.models import ROOT, Rule

logger = logging.getLogger(__name__)


class Placement(str, Enum):
    """Where a chunk's element goes relative to the open contexts."""

    ATTACH = "attach"  # reuse the element on top of the stack
    OPEN = "open"  # close deeper contexts and open a new element


@dataclass
class PathEntry:
    """One open context.

    `rule` is None for the document root. `wrapper` is the open wrapper
    element (tag, node) that consecutive wrapped children share,
    `has_text` records whether text was already appended to `node`, and
    `attributes` mirrors what was set on it.
    """

    rule: Rule | None
    depth: int
    node: Any
    wrapper: tuple[str, Any] | None = None
    has_text: bool = False
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return self.rule.key if self.rule is not None else ROOT


def decide_placement(top: PathEntry | None, rule: Rule) -> Placement:
    """Decide whether `rule` reuses the top context or opens a new one.

    Pure: depends only on the top entry and the incoming rule.
    """
    if (
        top is not None
        and top.rule is not None
        and top.rule.reusable
        and top.rule == rule
        and top.depth == rule.depth
    ):
        return Placement.ATTACH
    return Placement.OPEN


class PathStack:
    """The stack of open contexts for one compilation scope.

    The root entry is never popped. Depths strictly increase from root
    to tip after every push.
    """

    def __init__(self, root_node: Any, *, root_rule: Rule | None = None) -> None:
        self._entries = [PathEntry(rule=root_rule, depth=0, node=root_node)]

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def root(self) -> PathEntry:
        return self._entries[0]

    @property
    def top(self) -> PathEntry:
        return self._entries[-1]

    @property
    def depths(self) -> list[int]:
        return [entry.depth for entry in self._entries]

    @property
    def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]

    def place(
        self, rule: Rule, *, line: int | None = None, column: int | None = None
    ) -> tuple[Placement, PathEntry]:
        """Find the parent for a chunk of `rule`.

        Returns `(ATTACH, top)` when the chunk reuses the top element, or
        `(OPEN, parent)` after closing every context at least as deep as
        the rule. The stack is left untouched when placement fails.

        Raises:
            InvalidNestingError: If the remaining parent is not one the
                rule may appear within.
        """
        placement = decide_placement(self.top, rule)
        if placement is Placement.ATTACH:
            return placement, self.top

        index = self._parent_index(rule.depth)
        parent = self._entries[index]
        if rule.within is not None and parent.key not in rule.within:
            logger.debug(
                "Rejected %s under %s (allowed: %s)", rule.key, parent.key, rule.within
            )
            raise InvalidNestingError(
                f"'{rule.key}' cannot appear within '{parent.key}' "
                f"(allowed: {', '.join(rule.within) or 'nothing'})",
                line=line,
                column=column,
                marker=rule.marker or None,
            )
        del self._entries[index + 1 :]
        return placement, parent

    def push(self, rule: Rule, node: Any) -> PathEntry:
        if rule.depth <= self.top.depth:
            raise ValueError(
                f"Cannot push depth {rule.depth} above depth {self.top.depth}"
            )
        entry = PathEntry(rule=rule, depth=rule.depth, node=node)
        self._entries.append(entry)
        return entry

    def close(self, depth: int) -> None:
        """Close every context at `depth` or deeper."""
        self._pop_to(depth)

    def _parent_index(self, depth: int) -> int:
        index = len(self._entries) - 1
        while index > 0 and self._entries[index].depth >= depth:
            index -= 1
        return index

    def _pop_to(self, depth: int) -> None:
        del self._entries[self._parent_index(depth) + 1 :]
