"""Prometheus metrics for calculation outcomes, cache size and HTTP latency"""

from prometheus_client import Counter, Gauge, Histogram

# Calculation metrics
calculation_counter = Counter(
    "mortgage_calculation_total",
    "Total mortgage calculations requested",
    ["program", "outcome"],  # outcome: accepted | rejected
)

cached_calculations_gauge = Gauge(
    "mortgage_cached_calculations",
    "Calculations currently held in the result store",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(program: str, accepted: bool) -> None:
    """Count a calculation attempt that reached the calculator"""
    outcome = "accepted" if accepted else "rejected"
    calculation_counter.labels(program=program, outcome=outcome).inc()


def record_cache_size(size: int) -> None:
    cached_calculations_gauge.set(size)
