from .defaults import HTML_JARGON_NAME, default_registry, html_jargon
from .jargon import Jargon, build_jargon, extend
from .library import JargonLibrary
from .markers import MarkerMatch, MarkerTrie
from .models import (
    ROOT,
    AttributeSchema,
    ContentModel,
    Continuation,
    InlineRule,
    JargonDefinition,
    Rule,
)
from .registry import JargonRegistry

__all__ = [
    "ROOT",
    "AttributeSchema",
    "ContentModel",
    "Continuation",
    "HTML_JARGON_NAME",
    "InlineRule",
    "Jargon",
    "JargonDefinition",
    "JargonLibrary",
    "JargonRegistry",
    "MarkerMatch",
    "MarkerTrie",
    "Rule",
    "build_jargon",
    "default_registry",
    "extend",
    "html_jargon",
]
