"""Prometheus metrics for update calls."""

from prometheus_client import Counter, Histogram

UPDATE_RESULTS = Counter(
    "patchable_update_results_total",
    "Total number of update calls by terminal result",
    labelnames=["model", "operation", "outcome"],
)

UPDATE_FIELD_ERRORS = Counter(
    "patchable_update_field_errors_total",
    "Total number of field errors reported by update calls",
    labelnames=["model", "kind"],
)

UPDATE_LATENCY = Histogram(
    "patchable_update_latency_seconds",
    "Update call latency in seconds",
    labelnames=["model", "operation"],
    buckets=(0.0001, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
)
