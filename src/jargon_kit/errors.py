# src/jargon_kit/errors.py

"""Error hierarchy for jargon-kit.

Two families:
- Configuration errors (`AmbiguousMarkerError`, `MalformedJargonError`)
  describe a broken jargon. They are raised while a jargon is built and
  are never collected.
- Chunk errors (everything else) describe one bad chunk of source text.
  Depending on the compiler's error mode they are raised immediately or
  collected while compilation carries on.
"""


class JargonError(Exception):
    """Base class for every error raised by jargon-kit."""

    recoverable = False

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        marker: str | None = None,
        attribute: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.marker = marker
        self.attribute = attribute

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.kind}: {self.message}"
        if self.column is None:
            return f"line {self.line}: {self.kind}: {self.message}"
        return f"line {self.line}, column {self.column}: {self.kind}: {self.message}"


# ============================================================================
# Configuration errors
# ============================================================================


class ConfigurationError(JargonError):
    """A defect in a jargon definition. Always fatal."""


class AmbiguousMarkerError(ConfigurationError):
    """Two rules in one definition claim the same marker."""


class MalformedJargonError(ConfigurationError):
    """A jargon definition is structurally invalid."""


# ============================================================================
# Chunk errors
# ============================================================================


class ChunkError(JargonError):
    """A problem confined to a single chunk of source text."""

    recoverable = True


class UnknownMarkerError(ChunkError):
    """No rule (and no catch-all) matches the chunk's marker."""


class InvalidNestingError(ChunkError):
    """The rule's parent constraint is violated at this position."""


class InvalidAttributeError(ChunkError):
    """An attribute is malformed, disallowed or missing."""


class UnexpectedContentError(ChunkError):
    """Body content was supplied where the content model forbids it."""


class CompilationErrors(JargonError):
    """Every error collected during one compilation, in source order."""

    def __init__(self, errors: list[JargonError]) -> None:
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        super().__init__(
            f"{len(self.errors)} error(s) during compilation",
            line=first.line if first else None,
            column=first.column if first else None,
        )

    def __str__(self) -> str:
        return "\n".join([self.message, *(f"  {error}" for error in self.errors)])
