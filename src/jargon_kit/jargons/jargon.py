# src/jargon_kit/jargons/jargon.py

import logging
import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from jargon_kit.errors import (
    AmbiguousMarkerError,
    MalformedJargonError,
    UnknownMarkerError,
)

from .markers import MarkerMatch, MarkerTrie
from .models import (
    DEFAULT_MARKER_PATTERN,
    ROOT,
    ContentModel,
    InlineRule,
    JargonDefinition,
    Rule,
)

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "body"

# Characters that may follow a marker. Anything else means the marker is
# only a prefix of a longer word or token.
_BOUNDARY = frozenset(" \t{")


class Jargon:
    """A flattened, read-only dialect.

    Every override chain is resolved when the jargon is built, so lookups
    never walk the chain. `chain` and `origin()` are kept for diagnostics.
    """

    def __init__(
        self,
        *,
        name: str,
        rules: Mapping[str, Rule],
        origins: Mapping[str, str],
        chain: tuple[str, ...],
        catch_all: Rule | None = None,
        root: str = DEFAULT_ROOT,
        closer: str | None = None,
        marker_pattern: str = DEFAULT_MARKER_PATTERN,
        attribute_sigils: Mapping[str, str] | None = None,
        inlines: Mapping[str, InlineRule] | None = None,
        inline_open: str | None = None,
        inline_close: str | None = None,
    ) -> None:
        self.name = name
        self.rules = MappingProxyType(dict(rules))
        self.chain = chain
        self.catch_all = catch_all
        self.root = root
        self.closer = closer
        self.marker_pattern = marker_pattern
        self.attribute_sigils = MappingProxyType(dict(attribute_sigils or {}))
        self.inlines = MappingProxyType(dict(inlines or {}))
        self.inline_open = inline_open
        self.inline_close = inline_close
        self._origins = MappingProxyType(dict(origins))
        self._trie = MarkerTrie(self.rules)
        self._sigil_trie = MarkerTrie(self.attribute_sigils)
        self._inline_trie = MarkerTrie(self.inlines)
        try:
            self._token = re.compile(marker_pattern)
        except re.error as exc:
            raise MalformedJargonError(
                f"Jargon '{name}' has an invalid marker pattern: {exc}"
            ) from exc

    def __repr__(self) -> str:
        return f"Jargon(name={self.name!r}, rules={len(self.rules)})"

    def resolve(self, marker: str | None, *, line: int | None = None) -> Rule:
        """Return the rule for `marker`, falling back to the catch-all."""
        if marker is not None and marker in self.rules:
            return self.rules[marker]
        if self.catch_all is not None:
            return self.catch_all
        if marker is None:
            raise UnknownMarkerError(
                "Unmarked text and no catch-all rule", line=line
            )
        logger.error("Marker not found in jargon %s: %r", self.name, marker)
        raise UnknownMarkerError(
            f"No rule for marker '{marker}' in jargon '{self.name}'",
            line=line,
            marker=marker,
        )

    def origin(self, marker: str) -> str:
        """Name of the jargon in the chain that contributed `marker`'s rule."""
        try:
            return self._origins[marker]
        except KeyError:
            raise KeyError(f"Marker '{marker}' not found in jargon '{self.name}'")

    def match_marker(self, text: str) -> MarkerMatch | None:
        """Longest declared marker that starts `text` and ends at a boundary."""
        for match in self._trie.prefixes(text):
            if _at_boundary(text, match.end):
                return match
        return None

    def match_token(self, text: str) -> str | None:
        """A marker-shaped token at the start of `text`, declared or not."""
        match = self._token.match(text)
        if match is None or match.end() == 0 or not _at_boundary(text, match.end()):
            return None
        return match.group(0)

    def match_attribute_sigil(self, text: str, start: int = 0) -> MarkerMatch | None:
        return self._sigil_trie.longest(text, start)

    def match_inline(self, text: str, start: int = 0) -> MarkerMatch | None:
        """Longest span sigil at `start`, followed by a blank or the closer."""
        for match in self._inline_trie.prefixes(text, start):
            end = match.end
            if end == len(text) or text[end] in " \t":
                return match
            if self.inline_close and text.startswith(self.inline_close, end):
                return match
        return None

    def closer_count(self, text: str) -> int:
        """Number of closer tokens when `text` consists of nothing else."""
        if not self.closer or not text:
            return 0
        remainder = text.replace(" ", "").replace("\t", "")
        count, rest = divmod(len(remainder), len(self.closer))
        if rest or remainder != self.closer * count:
            return 0
        return count


def _at_boundary(text: str, end: int) -> bool:
    return end == len(text) or text[end] in _BOUNDARY


def build_jargon(definition: JargonDefinition, base: Jargon | None = None) -> Jargon:
    """Flatten `definition` on top of `base` into a `Jargon`.

    Raises:
        AmbiguousMarkerError: If the definition declares a marker twice.
        MalformedJargonError: If the result is structurally invalid.
    """
    if definition.extends is not None and base is None:
        raise MalformedJargonError(
            f"Jargon '{definition.name}' extends '{definition.extends}', "
            "which is not available"
        )
    if base is not None and definition.extends not in (None, base.name):
        raise MalformedJargonError(
            f"Jargon '{definition.name}' extends '{definition.extends}', "
            f"not '{base.name}'"
        )

    own: dict[str, Rule] = {}
    for rule in definition.rules:
        if not rule.marker:
            raise MalformedJargonError(
                f"Jargon '{definition.name}' has a rule without a marker "
                f"(tag {rule.tag!r})"
            )
        if rule.marker in own:
            raise AmbiguousMarkerError(
                f"Marker '{rule.marker}' is declared twice in jargon "
                f"'{definition.name}'",
                marker=rule.marker,
            )
        own[rule.marker] = rule

    rules = dict(base.rules) if base else {}
    origins = {marker: base.origin(marker) for marker in rules} if base else {}
    for marker, rule in own.items():
        rules[marker] = rule
        origins[marker] = definition.name

    sigils = dict(base.attribute_sigils) if base else {}
    sigils.update(definition.attribute_sigils)

    inlines = dict(base.inlines) if base else {}
    seen: set[str] = set()
    for inline in definition.inlines:
        if inline.sigil in seen:
            raise AmbiguousMarkerError(
                f"Span sigil '{inline.sigil}' is declared twice in jargon "
                f"'{definition.name}'",
                marker=inline.sigil,
            )
        seen.add(inline.sigil)
        inlines[inline.sigil] = inline

    jargon = Jargon(
        name=definition.name,
        rules=rules,
        origins=origins,
        chain=(definition.name, *(base.chain if base else ())),
        catch_all=definition.catch_all or (base.catch_all if base else None),
        root=definition.root or (base.root if base else DEFAULT_ROOT),
        closer=definition.closer or (base.closer if base else None),
        marker_pattern=definition.marker_pattern
        or (base.marker_pattern if base else DEFAULT_MARKER_PATTERN),
        attribute_sigils=sigils,
        inlines=inlines,
        inline_open=definition.inline_open or (base.inline_open if base else None),
        inline_close=definition.inline_close
        or (base.inline_close if base else None),
    )
    _check_structure(jargon)
    _check_inlines(jargon)
    logger.debug(
        "Built jargon %s (%d rules, chain=%s)",
        jargon.name,
        len(jargon.rules),
        " > ".join(jargon.chain),
    )
    return jargon


def extend(
    base: Jargon,
    overrides: Sequence[Rule] | JargonDefinition,
    *,
    name: str | None = None,
) -> Jargon:
    """Derive a jargon from `base`; rules in `overrides` shadow inherited ones."""
    if isinstance(overrides, JargonDefinition):
        definition = overrides.model_copy(
            update={"extends": base.name, "name": name or overrides.name}
        )
    else:
        definition = JargonDefinition(
            name=name or f"{base.name}+",
            extends=base.name,
            rules=list(overrides),
        )
    return build_jargon(definition, base)


def _check_structure(jargon: Jargon) -> None:
    if jargon.closer is not None and jargon.closer in jargon.rules:
        raise MalformedJargonError(
            f"Closer '{jargon.closer}' of jargon '{jargon.name}' is also a marker",
            marker=jargon.closer,
        )

    rules = list(jargon.rules.values())
    if jargon.catch_all is not None:
        rules.append(jargon.catch_all)

    depths: dict[str, list[int]] = {}
    scopes: set[str] = set()
    for rule in rules:
        depths.setdefault(rule.key, []).append(rule.depth)
        if rule.content is ContentModel.BLOCK:
            scopes.add(rule.key)

    for rule in rules:
        for parent in rule.within or ():
            if parent == ROOT:
                continue
            if parent not in depths:
                raise MalformedJargonError(
                    f"Rule '{rule.key}' in jargon '{jargon.name}' may only "
                    f"appear within unknown rule '{parent}'",
                    marker=rule.marker or None,
                )
            if parent in scopes:
                # Block bodies compile in their own scope rooted at depth 0.
                continue
            if min(depths[parent]) >= rule.depth:
                # The parent would always be popped before this rule attaches.
                raise MalformedJargonError(
                    f"Rule '{rule.key}' (depth {rule.depth}) can never nest "
                    f"within '{parent}' (depth {min(depths[parent])})",
                    marker=rule.marker or None,
                )


def _check_inlines(jargon: Jargon) -> None:
    delimiters = (jargon.inline_open, jargon.inline_close)
    if not any(delimiters):
        if jargon.inlines:
            raise MalformedJargonError(
                f"Jargon '{jargon.name}' declares span sigils but no "
                "inline_open/inline_close delimiters"
            )
        return
    if not all(delimiters):
        raise MalformedJargonError(
            f"Jargon '{jargon.name}' must declare both inline_open and inline_close"
        )
    if jargon.inline_open == jargon.inline_close:
        raise MalformedJargonError(
            f"Jargon '{jargon.name}' uses '{jargon.inline_open}' to both open "
            "and close spans"
        )
