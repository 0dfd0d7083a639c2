"""
Unit tests for the in-process metrics registry
"""
import threading

import pytest

from app.core.metrics import MetricsRegistry


class RecordingLog:
    def __init__(self):
        self.lines = []

    def info(self, msg, *args, **kwargs):
        self.lines.append(("info", msg))

    def warning(self, msg, *args, **kwargs):
        self.lines.append(("warning", msg))

    def error(self, msg, *args, **kwargs):
        self.lines.append(("error", msg))


def test_increment_accumulates_amounts(metrics):
    metrics.increment("orders")
    metrics.increment("orders", 4)
    metrics.increment("orders", 2.5)

    assert metrics.get_metrics()["orders"] == 7.5


def test_increment_returns_new_total_and_logs_it(clock):
    log = RecordingLog()
    registry = MetricsRegistry(log=log, clock=clock)

    assert registry.increment("hits", 3) == 3
    assert registry.increment("hits") == 4
    assert ("info", "Metric incremented: hits = 4") in log.lines


def test_gauge_keeps_last_value(metrics):
    metrics.gauge("temperature", 10)
    metrics.gauge("temperature", 3)

    assert metrics.get_metrics()["temperature"] == 3


def test_gauge_overwrites_counter_of_same_name(metrics):
    metrics.increment("shared", 5)
    metrics.gauge("shared", 1)

    assert metrics.get_metrics()["shared"] == 1


def test_end_timer_without_start_is_noop(metrics):
    metrics.increment("existing")
    before = metrics.get_metrics()

    assert metrics.end_timer("never_started") is None
    assert metrics.get_metrics() == before
    assert "never_started_duration_ms" not in metrics.get_metrics()


def test_timer_records_duration_and_is_consumed(metrics, clock):
    metrics.start_timer("x")
    clock.advance(250)

    assert metrics.end_timer("x") == 250
    assert metrics.get_metrics()["x_duration_ms"] == 250
    assert metrics.pending_timers() == []

    clock.advance(100)
    assert metrics.end_timer("x") is None
    assert metrics.get_metrics()["x_duration_ms"] == 250


def test_last_start_wins(metrics, clock):
    metrics.start_timer("job")
    clock.advance(100)
    metrics.start_timer("job")
    clock.advance(40)

    assert metrics.end_timer("job") == 40


def test_duration_is_never_negative(metrics, clock):
    metrics.start_timer("skew")
    clock.advance(-500)

    assert metrics.end_timer("skew") == 0
    assert metrics.get_metrics()["skew_duration_ms"] >= 0


def test_default_clock_produces_non_negative_duration():
    registry = MetricsRegistry()
    registry.start_timer("wall")

    assert registry.end_timer("wall") >= 0


def test_time_block_ends_timer_when_block_raises(metrics, clock):
    with pytest.raises(RuntimeError):
        with metrics.time_block("render"):
            clock.advance(15)
            raise RuntimeError("boom")

    assert metrics.get_metrics()["render_duration_ms"] == 15
    assert metrics.pending_timers() == []


def test_get_metrics_returns_snapshot(metrics):
    metrics.increment("a")
    snapshot = metrics.get_metrics()
    snapshot["a"] = 100
    metrics.increment("a")

    assert metrics.get_metrics()["a"] == 2
    assert snapshot["a"] == 100


def test_reset_clears_metrics_and_timers(metrics):
    metrics.increment("a")
    metrics.start_timer("t")

    metrics.reset()

    assert metrics.get_metrics() == {}
    assert metrics.pending_timers() == []
    assert metrics.end_timer("t") is None


def test_concurrent_increments_are_not_lost(clock):
    registry = MetricsRegistry(log=RecordingLog(), clock=clock)

    def work():
        for _ in range(500):
            registry.increment("requests_total")

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert registry.get_metrics()["requests_total"] == 4000
