from dataclasses import dataclass, field
from typing import Any

from jargon_kit.dom.base import DOMProvider
from jargon_kit.errors import CompilationErrors, JargonError
from jargon_kit.jargons.jargon import Jargon
from jargon_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import CompilerConfig
from .reporter import ErrorReporter


@dataclass(frozen=True)
class CompilationContext:
    """Everything one compilation needs, passed explicitly.

    Created per call; never shared between compilations.
    """

    jargon: Jargon
    document: DOMProvider
    reporter: ErrorReporter
    config: CompilerConfig = field(default_factory=CompilerConfig)
    metrics_hook: MetricsHook = field(default_factory=NoOpMetricsHook)


@dataclass(frozen=True)
class CompilationResult:
    """The best-effort tree plus every collected error, in source order."""

    root: Any
    errors: tuple[JargonError, ...] = ()
    chunks: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise CompilationErrors(list(self.errors))
