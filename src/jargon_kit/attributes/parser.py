# src/jargon_kit/attributes/parser.py

"""Attribute container parsing.

A container is the brace-delimited group right after a marker:

    # {id=intro .lead title="A long title" hidden} Introduction

Entries are separated by blanks and take one of three forms:
`name=value` (value optionally quoted), a bare `name` (empty value), or
a jargon-declared sigil such as `.lead` standing for `class=lead`.
"""

import logging
import re
from collections.abc import Iterable
from enum import Enum

from jargon_kit.errors import InvalidAttributeError
from jargon_kit.jargons.jargon import Jargon
from jargon_kit.jargons.models import Rule

logger = logging.getLogger(__name__)

NAME = re.compile(r"[A-Za-z_:][-A-Za-z0-9_.:]*")
_RESERVED_NAME = re.compile(r"^xmlns(?::|$)")
_BARE_VALUE = re.compile(r"[^\s\"'=]*")
_QUOTES = "\"'"


class DuplicatePolicy(str, Enum):
    """How a repeated attribute name is resolved."""

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"
    JOIN = "join"


def combine(existing: str, new: str, policy: DuplicatePolicy) -> str:
    if policy is DuplicatePolicy.FIRST_WINS:
        return existing
    if policy is DuplicatePolicy.JOIN:
        return f"{existing} {new}" if existing and new else existing or new
    return new


def merge_attributes(
    layers: Iterable[Iterable[tuple[str, str]]],
    policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
) -> dict[str, str]:
    """Fold `(name, value)` pairs into one mapping.

    A repeated name keeps the position of its first occurrence; its
    value is decided by `policy`.
    """
    merged: dict[str, str] = {}
    for layer in layers:
        for name, value in layer:
            if name in merged:
                merged[name] = combine(merged[name], value, policy)
            else:
                merged[name] = value
    return merged


def parse_attributes(
    text: str,
    *,
    rule: Rule,
    jargon: Jargon,
    policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
    line: int | None = None,
    column: int | None = None,
) -> dict[str, str]:
    """Parse an attribute container into an ordered mapping.

    Raises:
        InvalidAttributeError: If the container is malformed, a name is
            not a valid identifier, or the rule does not permit it.
    """
    pairs = list(_scan(text, jargon=jargon, line=line, column=column))
    for name, _ in pairs:
        check_name(name, rule=rule, line=line, column=column)
    return merge_attributes([pairs], policy)


def check_name(
    name: str, *, rule: Rule, line: int | None = None, column: int | None = None
) -> None:
    if not NAME.fullmatch(name) or _RESERVED_NAME.match(name):
        raise InvalidAttributeError(
            f"'{name}' is not a valid attribute name",
            line=line,
            column=column,
            marker=rule.marker or None,
            attribute=name,
        )
    if not rule.attributes.open and name not in rule.known_attributes:
        logger.debug("Attribute %s not permitted on %s", name, rule.key)
        raise InvalidAttributeError(
            f"Attribute '{name}' is not allowed on '{rule.key}'",
            line=line,
            column=column,
            marker=rule.marker or None,
            attribute=name,
        )


def container_end(text: str, start: int = 0) -> int:
    """Index of the `}` closing the container opened at `text[start]`.

    Braces inside quoted values do not count. Returns -1 when the
    container is never closed.
    """
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "}":
            return index
        if char in _QUOTES:
            close_at = text.find(char, index + 1)
            if close_at == -1:
                return -1
            index = close_at
        index += 1
    return -1


def _scan(text: str, *, jargon: Jargon, line: int | None, column: int | None):
    if len(text) < 2 or text[0] != "{" or text[-1] != "}":
        raise InvalidAttributeError(
            f"Attribute container {text!r} is not wrapped in braces",
            line=line,
            column=column,
        )

    end = len(text) - 1
    index = 1
    while index < end:
        char = text[index]
        if char in " \t":
            index += 1
            continue

        name_match = NAME.match(text, index, end)
        if name_match is not None:
            name = name_match.group(0)
            index = name_match.end()
            if index < end and text[index] == "=":
                value, index = _value(text, index + 1, end, name, line, column)
            elif index < end and text[index] not in " \t":
                raise InvalidAttributeError(
                    f"Unexpected {text[index]!r} after attribute '{name}'",
                    line=line,
                    column=column,
                    attribute=name,
                )
            else:
                value = ""
            yield name, value
            continue

        sigil = jargon.match_attribute_sigil(text, index)
        if sigil is not None:
            value_match = _BARE_VALUE.match(text, sigil.end, end)
            yield jargon.attribute_sigils[sigil.marker], value_match.group(0)
            index = value_match.end()
            continue

        raise InvalidAttributeError(
            f"Cannot parse attribute container {text!r} at offset {index}",
            line=line,
            column=column,
        )


def _value(
    text: str,
    index: int,
    end: int,
    name: str,
    line: int | None,
    column: int | None,
) -> tuple[str, int]:
    if index < end and text[index] in _QUOTES:
        quote = text[index]
        close_at = text.find(quote, index + 1, end)
        if close_at == -1:
            raise InvalidAttributeError(
                f"Unterminated quoted value for attribute '{name}'",
                line=line,
                column=column,
                attribute=name,
            )
        return text[index + 1 : close_at], close_at + 1
    value_match = _BARE_VALUE.match(text, index, end)
    return value_match.group(0), value_match.end()
