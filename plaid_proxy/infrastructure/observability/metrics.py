"""Prometheus metrics for monitoring Plaid upstream calls and re-auth prompts"""

from prometheus_client import Counter, Histogram

from plaid_proxy.domain.results import TransportFailure, UpstreamFailure, UpstreamResult

# Upstream metrics
upstream_request_counter = Counter(
    "plaid_upstream_requests_total",
    "Calls made to the Plaid API",
    ["endpoint", "outcome"],  # success | upstream_error | transport_error
)

upstream_latency_histogram = Histogram(
    "plaid_upstream_latency_seconds",
    "Plaid API response time",
    ["endpoint"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

item_login_required_counter = Counter(
    "plaid_item_login_required_total",
    "Transactions calls answered with ITEM_LOGIN_REQUIRED",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_upstream_result(endpoint: str, result: UpstreamResult) -> None:
    """Count an upstream call by its outcome"""
    if isinstance(result, UpstreamFailure):
        outcome = "upstream_error"
    elif isinstance(result, TransportFailure):
        outcome = "transport_error"
    else:
        outcome = "success"

    upstream_request_counter.labels(endpoint=endpoint, outcome=outcome).inc()
