"""Prometheus metrics collection for observability."""

from prometheus_client import (
    Counter,
    Histogram,
    generate_latest,
    REGISTRY,
)

# HTTP Request Metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# Login Metrics
login_attempts_total = Counter(
    "login_attempts_total",
    "Total number of form login attempts",
    ["outcome"],
)

# Error Metrics
errors_total = Counter(
    "errors_total",
    "Total number of errors",
    ["error_code", "error_category"],
)


class MetricsCollector:
    """Helper class for collecting metrics."""

    @staticmethod
    def record_http_request(method: str, endpoint: str, status_code: int, duration: float):
        """Record HTTP request metrics."""
        http_requests_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

    @staticmethod
    def record_login_attempt(outcome: str):
        """Record a login attempt by outcome (``success`` or ``failed``)."""
        login_attempts_total.labels(outcome=outcome).inc()

    @staticmethod
    def record_error(error_code: str, error_category: str):
        """Record error occurrence."""
        errors_total.labels(error_code=error_code, error_category=error_category).inc()

    @staticmethod
    def get_metrics() -> bytes:
        """Get Prometheus metrics in text format."""
        return generate_latest(REGISTRY)


# Global instance
metrics = MetricsCollector()
