from collections import defaultdict
from typing import Protocol


class MetricsHook(Protocol):
    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass


class InMemoryMetricsHook:
    """Keeps counters and latencies in process memory.

    Counters are keyed by metric name plus sorted label pairs so that
    `compile_errors_total{kind=...}` series stay separate.
    """

    def __init__(self) -> None:
        self.counters: dict[tuple, int] = defaultdict(int)
        self.latencies: dict[str, list[float]] = defaultdict(list)

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[_series(name, labels)] += value

    def count(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self.counters.get(_series(name, labels), 0)


def _series(name: str, labels: dict[str, str] | None) -> tuple:
    return (name, *sorted((labels or {}).items()))
