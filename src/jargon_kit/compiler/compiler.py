import logging
from collections.abc import Callable
from time import monotonic

from jargon_kit.dom.base import DOMProvider
from jargon_kit.dom.simple import SimpleDocument
from jargon_kit.jargons.jargon import Jargon
from jargon_kit.observability import names
from jargon_kit.observability.base import MetricsHook, NoOpMetricsHook
from jargon_kit.paths.path import PathStack
from jargon_kit.text.lines import split_lines

from .builder import ElementBuilder
from .config import CompilerConfig
from .context import CompilationContext, CompilationResult
from .reporter import ErrorReporter

logger = logging.getLogger(__name__)


class Compiler:
    """Compiles markup text into an element tree for one jargon.

    A compiler holds only immutable configuration; every call to
    `compile` gets its own document, reporter and path stack.
    """

    def __init__(
        self,
        jargon: Jargon,
        *,
        config: CompilerConfig | None = None,
        document_factory: Callable[[], DOMProvider] = SimpleDocument,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.jargon = jargon
        self.config = config or CompilerConfig()
        self.document_factory = document_factory
        self.metrics_hook = metrics_hook

    def compile(self, text: str) -> CompilationResult:
        """Compile `text`.

        In fail-fast mode the first chunk error is raised. In collect-all
        mode the returned result carries the best-effort tree and every
        error in source order.
        """
        start = monotonic()
        document = self.document_factory()
        context = CompilationContext(
            jargon=self.jargon,
            document=document,
            reporter=ErrorReporter(self.config.mode, self.metrics_hook),
            config=self.config,
            metrics_hook=self.metrics_hook,
        )
        root = document.create_element(self.config.root_tag or self.jargon.root)
        builder = ElementBuilder(context)
        try:
            builder.compile_lines(split_lines(text), PathStack(root))
        finally:
            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(names.COMPILE_DURATION, elapsed_ms)
            self.metrics_hook.increment(
                names.COMPILE_REQUESTS_TOTAL, labels={"jargon": self.jargon.name}
            )
            self.metrics_hook.increment(names.COMPILE_CHUNKS_TOTAL, builder.chunks)

        errors = context.reporter.errors
        logger.info(
            "Compiled %d chunk(s) with jargon %s (%d error(s))",
            builder.chunks,
            self.jargon.name,
            len(errors),
        )
        return CompilationResult(root=root, errors=errors, chunks=builder.chunks)


def compile_text(
    text: str,
    jargon: Jargon,
    *,
    config: CompilerConfig | None = None,
    document_factory: Callable[[], DOMProvider] = SimpleDocument,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> CompilationResult:
    compiler = Compiler(
        jargon,
        config=config,
        document_factory=document_factory,
        metrics_hook=metrics_hook,
    )
    return compiler.compile(text)
