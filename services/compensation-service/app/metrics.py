"""
Prometheus metrics for Compensation Service.

Tracks HTTP traffic, salary operations by outcome, and database latency.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "compensation_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "compensation_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0),
)

# Salary operation metrics
compensation_operations_total = Counter(
    "compensation_operations_total",
    "Total salary operations",
    ["operation", "outcome"],
)

# Database metrics
compensation_db_operation_duration_seconds = Histogram(
    "compensation_db_operation_duration_seconds",
    "Database operation duration in seconds",
    ["operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_operation(operation: str, outcome: str):
    """Track a salary operation; outcome is 'success' or an error kind."""
    compensation_operations_total.labels(operation=operation, outcome=outcome).inc()


def track_db_operation(operation: str, duration: float):
    """Track database operation latency."""
    compensation_db_operation_duration_seconds.labels(operation=operation).observe(duration)


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
