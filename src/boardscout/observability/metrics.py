"""
Defines Prometheus metrics for the application.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram
from prometheus_client import generate_latest


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race; use the collector that won.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    # Counter names carry the _total suffix already; prometheus_client strips and re-adds it
    return {
        "extractions_total": Counter(
            "boardscout_extractions_total",
            "Completed extractions by outcome and winning strategy",
            ["status", "method"],
        ),
        "strategy_attempts_total": Counter(
            "boardscout_strategy_attempts_total",
            "Strategy attempts by result (hit, miss, error)",
            ["strategy", "result"],
        ),
        "relay_attempts_total": Counter(
            "boardscout_relay_attempts_total",
            "Relay fetch attempts by backend and result",
            ["backend", "result"],
        ),
        "relay_fetch_seconds": Histogram(
            "boardscout_relay_fetch_seconds",
            "Latency of relay fetch attempts",
            ["backend"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()


def increment(name: str, value: float = 1.0, labels: Dict[str, Any] | None = None) -> None:
    """Increment a counter metric."""
    if name in METRICS:
        metric = METRICS[name]
        if labels is not None:
            metric.labels(**labels).inc(value)
        else:
            metric.inc(value)


def observe(name: str, value: float, labels: Dict[str, Any] | None = None) -> None:
    """Observe a histogram metric."""
    if name in METRICS:
        metric = METRICS[name]
        if labels is not None:
            metric.labels(**labels).observe(value)
        else:
            metric.observe(value)


def export_prometheus() -> bytes:
    """Export metrics in Prometheus text format."""
    return generate_latest()
