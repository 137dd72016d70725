from jargon_kit.observability import InMemoryMetricsHook, NoOpMetricsHook, names


def test_noop_hook_accepts_everything() -> None:
    hook = NoOpMetricsHook()
    hook.record_latency(names.COMPILE_DURATION, 1.5)
    hook.increment(names.COMPILE_ERRORS_TOTAL, labels={"kind": "UnknownMarkerError"})


def test_in_memory_hook_separates_label_series() -> None:
    hook = InMemoryMetricsHook()
    hook.increment(names.COMPILE_ERRORS_TOTAL, labels={"kind": "A"})
    hook.increment(names.COMPILE_ERRORS_TOTAL, labels={"kind": "A"})
    hook.increment(names.COMPILE_ERRORS_TOTAL, 3, labels={"kind": "B"})

    assert hook.count(names.COMPILE_ERRORS_TOTAL, {"kind": "A"}) == 2
    assert hook.count(names.COMPILE_ERRORS_TOTAL, {"kind": "B"}) == 3
    assert hook.count(names.COMPILE_ERRORS_TOTAL) == 0


def test_in_memory_hook_records_latencies() -> None:
    hook = InMemoryMetricsHook()
    hook.record_latency(names.COMPILE_DURATION, 2.0)
    hook.record_latency(names.COMPILE_DURATION, 4.0)
    assert hook.latencies[names.COMPILE_DURATION] == [2.0, 4.0]
