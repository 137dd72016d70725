import logging

from jargon_kit.errors import JargonError
from jargon_kit.observability import names
from jargon_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import ErrorMode

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Raises or records chunk errors according to the error mode.

    Configuration errors are never recorded; they always propagate.
    """

    def __init__(
        self,
        mode: ErrorMode = ErrorMode.FAIL_FAST,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.mode = mode
        self.metrics_hook = metrics_hook
        self._errors: list[JargonError] = []
        self._raised: list[JargonError] = []

    @property
    def errors(self) -> tuple[JargonError, ...]:
        return tuple(self._errors)

    def report(self, error: JargonError) -> None:
        if error in self._raised:
            # Already reported by a nested block body; keep unwinding.
            raise error
        self.metrics_hook.increment(
            names.COMPILE_ERRORS_TOTAL, labels={"kind": error.kind}
        )
        if self.mode is ErrorMode.FAIL_FAST or not error.recoverable:
            self._raised.append(error)
            raise error
        logger.warning("Skipping chunk: %s", error)
        self._errors.append(error)
