"""Prometheus metric definitions for the encoder service."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


encode_requests_total = Counter("encode_requests_total", "Total payment encode requests", ["service"])
encode_success_total = Counter("encode_success_total", "Total successfully encoded payments", ["service"])
encode_failure_total = Counter(
    "encode_failure_total",
    "Total rejected or failed encode requests",
    ["service", "reason"],
)
encode_latency_seconds = Histogram("encode_latency_seconds", "Payment encode latency seconds", ["service"])
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
