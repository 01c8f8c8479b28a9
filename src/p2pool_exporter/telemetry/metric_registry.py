"""Exporter self-instrumentation.

Module-level constants on a dedicated CollectorRegistry so /exporter/metrics
only contains exporter metrics (not python_gc_*, process_*, etc.).
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

PREFIX = "p2pool_exporter_"

EXPORTER_REGISTRY = CollectorRegistry()

REQUESTS_TOTAL = Counter(
    f"{PREFIX}requests_total",
    "Total requests served per route and outcome",
    labelnames=["route", "status"],
    registry=EXPORTER_REGISTRY,
)

SOURCE_ERRORS_TOTAL = Counter(
    f"{PREFIX}source_errors_total",
    "Total failures reading or decoding P2Pool state files",
    labelnames=["reason"],
    registry=EXPORTER_REGISTRY,
)

RENDER_DURATION_SECONDS = Histogram(
    f"{PREFIX}render_duration_seconds",
    "Time spent reading state files and rendering a response",
    labelnames=["route"],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
    registry=EXPORTER_REGISTRY,
)
