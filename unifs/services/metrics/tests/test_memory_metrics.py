from unifs.services.metrics.memory_metrics import MemoryMetrics
from unifs.services.metrics.noop_metrics import NoopMetrics


def test_counter_accumulates():
    m = MemoryMetrics()
    m.counter("adapter_operations_total")
    m.counter("adapter_operations_total", 2)
    assert m.counters["adapter_operations_total"] == 3


def test_gauge_keeps_last_value():
    m = MemoryMetrics()
    m.gauge("registered_adapters", 1)
    m.gauge("registered_adapters", 4)
    assert m.gauges["registered_adapters"] == 4


def test_histogram_collects_values():
    m = MemoryMetrics()
    m.histogram("adapter_operation_duration_seconds", 0.1)
    m.histogram("adapter_operation_duration_seconds", 0.2)
    assert m.histograms["adapter_operation_duration_seconds"] == [0.1, 0.2]


def test_tags_for_filters_by_name():
    m = MemoryMetrics()
    m.counter("a", tags={"adapter": "default"})
    m.counter("b", tags={"adapter": "archive"})
    assert m.tags_for("a") == [{"adapter": "default"}]


def test_noop_metrics_accepts_everything():
    m = NoopMetrics()
    m.counter("x", tags={"k": "v"})
    m.gauge("y", 1.0)
    m.histogram("z", 0.5)
