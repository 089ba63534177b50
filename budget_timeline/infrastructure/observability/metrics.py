"""Prometheus metrics for timeline builds, event mix and skipped records"""

from prometheus_client import Counter, Histogram
from budget_timeline.domain.models import TimelineResult

# Timeline metrics
timeline_build_counter = Counter(
    "timeline_builds_total",
    "Total timeline builds",
    ["view"],  # timeline | calendar | adhoc | export
)

timeline_event_counter = Counter(
    "timeline_events_total",
    "Events emitted by timeline builds",
    ["type", "status"],
)

skipped_record_counter = Counter(
    "timeline_skipped_records_total",
    "Source records skipped as malformed",
    ["source_type"],  # recurring | installment
)

timeline_build_duration_histogram = Histogram(
    "timeline_build_duration_seconds",
    "Time spent loading records and building a timeline",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

# Data store metrics
data_store_failures_counter = Counter(
    "data_store_failures_total",
    "Failed payment record loads",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_timeline(view: str, result: TimelineResult) -> None:
    """Record build, event mix and skipped-record metrics for one timeline"""
    timeline_build_counter.labels(view=view).inc()

    for event in result.events:
        timeline_event_counter.labels(type=event.type.value, status=event.status.value).inc()

    for diagnostic in result.skipped:
        skipped_record_counter.labels(source_type=diagnostic.source_type).inc()
