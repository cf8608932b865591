from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
)

registry = CollectorRegistry()

# outcome is one of: success, api_error, malformed, transport_error, error,
# cancelled
client_requests_total = Counter(
    "client_requests_total",
    "Total API calls by endpoint, operation and outcome",
    ["endpoint", "operation", "outcome"],
    registry=registry,
)

client_request_duration_seconds = Histogram(
    "client_request_duration_seconds",
    "API call latency in seconds",
    ["endpoint", "operation", "outcome"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10, 30, 60),
    registry=registry,
)

__all__ = [
    "registry",
    "client_requests_total",
    "client_request_duration_seconds",
    "generate_latest",
]
