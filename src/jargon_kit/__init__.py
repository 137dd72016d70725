# Attributes
from .attributes import DuplicatePolicy, merge_attributes, parse_attributes

# Chunking
from .chunking import Chunk, ChunkKind, assemble_chunks

# Compiler
from .compiler import (
    CompilationResult,
    Compiler,
    CompilerConfig,
    ErrorMode,
    compile_text,
)

# DOM
from .dom import DOMProvider, Element, SimpleDocument, Text, serialize

# Errors
from .errors import (
    AmbiguousMarkerError,
    ChunkError,
    CompilationErrors,
    ConfigurationError,
    InvalidAttributeError,
    InvalidNestingError,
    JargonError,
    MalformedJargonError,
    UnexpectedContentError,
    UnknownMarkerError,
)

# Inlines
from .inlines import Span, parse_spans

# Jargons
from .jargons import (
    ContentModel,
    Continuation,
    InlineRule,
    Jargon,
    JargonDefinition,
    JargonLibrary,
    JargonRegistry,
    Rule,
    build_jargon,
    default_registry,
    extend,
    html_jargon,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Paths
from .paths import PathStack, Placement, decide_placement

# Text
from .text import Line, escape, split_lines

__all__ = [
    # Attributes
    "DuplicatePolicy",
    "merge_attributes",
    "parse_attributes",
    # Chunking
    "Chunk",
    "ChunkKind",
    "assemble_chunks",
    # Compiler
    "CompilationResult",
    "Compiler",
    "CompilerConfig",
    "ErrorMode",
    "compile_text",
    # DOM
    "DOMProvider",
    "Element",
    "SimpleDocument",
    "Text",
    "serialize",
    # Errors
    "AmbiguousMarkerError",
    "ChunkError",
    "CompilationErrors",
    "ConfigurationError",
    "InvalidAttributeError",
    "InvalidNestingError",
    "JargonError",
    "MalformedJargonError",
    "UnexpectedContentError",
    "UnknownMarkerError",
    # Inlines
    "Span",
    "parse_spans",
    # Jargons
    "ContentModel",
    "Continuation",
    "InlineRule",
    "Jargon",
    "JargonDefinition",
    "JargonLibrary",
    "JargonRegistry",
    "Rule",
    "build_jargon",
    "default_registry",
    "extend",
    "html_jargon",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Paths
    "PathStack",
    "Placement",
    "decide_placement",
    # Text
    "Line",
    "escape",
    "split_lines",
]
