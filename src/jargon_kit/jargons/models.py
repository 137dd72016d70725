# src/jargon_kit/jargons/models.py

"""Declarative jargon definitions.

These are the in-memory shapes a jargon file is validated into. They
carry no resolution logic; see `jargon.py` for the flattened,
immutable `Jargon` the compiler consumes.
"""

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from jargon_kit.text.escaping import decode_references

ROOT = "#root"

DEFAULT_MARKER_PATTERN = r"[^\w\s{}]+"

_NAME = re.compile(r"^[A-Za-z_][-A-Za-z0-9_.:]*$")
_FORBIDDEN_IN_MARKER = re.compile(r"[\s{}]")


class ContentModel(str, Enum):
    """What the body of a chunk may hold."""

    BLOCK = "block"
    INLINE = "inline"
    LITERAL = "literal"
    COMMENT = "comment"
    VOID = "void"


_SPAN_CONTENT = frozenset(
    {ContentModel.INLINE, ContentModel.LITERAL, ContentModel.COMMENT}
)


class Continuation(str, Enum):
    """Which following lines extend a chunk."""

    LINES = "lines"
    INDENTED = "indented"
    NONE = "none"


class AttributeSchema(BaseModel):
    allowed: list[str] = Field(default_factory=list)
    required: list[str] = Field(default_factory=list)
    open: bool = False

    class Config:
        extra = "forbid"
        frozen = True

    def permits(self, name: str) -> bool:
        return self.open or name in self.allowed or name in self.required


class Rule(BaseModel):
    marker: str = ""
    name: str | None = None
    tag: str | None = None
    depth: int = Field(ge=1)
    content: ContentModel = ContentModel.INLINE
    continuation: Continuation = Continuation.LINES
    reusable: bool = False
    within: list[str] | None = None
    attributes: AttributeSchema = Field(default_factory=AttributeSchema)
    defaults: dict[str, str] = Field(default_factory=dict)
    heading: str | None = None
    wrapper: str | None = None
    text_to: list[str] = Field(default_factory=list)

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("marker")
    @classmethod
    def _decode_marker(cls, value: str) -> str:
        marker = decode_references(value)
        if _FORBIDDEN_IN_MARKER.search(marker):
            raise ValueError(f"marker {value!r} contains whitespace or braces")
        return marker

    @field_validator("tag", "heading", "wrapper")
    @classmethod
    def _check_tag(cls, value: str | None) -> str | None:
        if value is not None and not _NAME.match(value):
            raise ValueError(f"{value!r} is not a valid element name")
        return value

    @model_validator(mode="after")
    def _check_shape(self) -> "Rule":
        if self.tag is None and self.content is not ContentModel.COMMENT:
            raise ValueError("tag is required unless content is 'comment'")
        if self.heading is not None and self.content is not ContentModel.BLOCK:
            raise ValueError("heading is only meaningful for block content")
        return self

    @property
    def key(self) -> str:
        """The name other rules use to refer to this one in `within`."""
        return self.name or self.tag or self.marker

    @property
    def known_attributes(self) -> set[str]:
        return {
            *self.attributes.allowed,
            *self.attributes.required,
            *self.defaults,
            *self.text_to,
        }


class InlineRule(BaseModel):
    """A span written inside inline text as `<open><sigil> text<close>`."""

    sigil: str
    tag: str | None = None
    content: ContentModel = ContentModel.INLINE
    defaults: dict[str, str] = Field(default_factory=dict)
    text_to: list[str] = Field(default_factory=list)
    text_from: str | None = None

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("sigil")
    @classmethod
    def _decode_sigil(cls, value: str) -> str:
        sigil = decode_references(value)
        if not sigil or _FORBIDDEN_IN_MARKER.search(sigil):
            raise ValueError(
                f"sigil {value!r} is empty or contains whitespace or braces"
            )
        return sigil

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: str | None) -> str | None:
        if value is not None and not _NAME.match(value):
            raise ValueError(f"{value!r} is not a valid element name")
        return value

    @model_validator(mode="after")
    def _check_shape(self) -> "InlineRule":
        if self.content not in _SPAN_CONTENT:
            raise ValueError("span content must be 'inline', 'literal' or 'comment'")
        if self.tag is None and self.content is ContentModel.INLINE:
            raise ValueError("tag is required unless content is 'literal' or 'comment'")
        if (self.text_to or self.text_from) and self.content is not ContentModel.INLINE:
            raise ValueError("text_to and text_from need inline content")
        return self


class JargonDefinition(BaseModel):
    """A jargon as written by its author, before flattening."""

    name: str
    extends: str | None = None
    root: str | None = None
    closer: str | None = None
    marker_pattern: str | None = None
    attribute_sigils: dict[str, str] = Field(default_factory=dict)
    inline_open: str | None = None
    inline_close: str | None = None
    catch_all: Rule | None = None
    rules: list[Rule] = Field(default_factory=list)
    inlines: list[InlineRule] = Field(default_factory=list)

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("attribute_sigils")
    @classmethod
    def _decode_sigils(cls, value: dict[str, str]) -> dict[str, str]:
        return {decode_references(sigil): name for sigil, name in value.items()}

    @field_validator("closer", "inline_open", "inline_close")
    @classmethod
    def _decode_delimiter(cls, value: str | None) -> str | None:
        return decode_references(value) if value is not None else None
