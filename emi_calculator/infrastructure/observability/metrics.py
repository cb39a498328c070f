"""Prometheus metrics for calculation volume, input errors and request latency"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "emi_calculation_total",
    "Total EMI calculation requests",
    ["outcome"],  # computed | rejected
)

validation_failure_counter = Counter(
    "emi_validation_failure_total",
    "Rejected calculation inputs by error kind",
    ["kind"],  # MissingField | NotNumeric | NonPositive | PolicyViolation
)

principal_bucket_counter = Counter(
    "emi_principal_bucket_total",
    "Computed loans by principal bucket",
    ["bucket"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(principal: float) -> None:
    """Record a successful calculation and bucket its principal"""
    calculation_counter.labels(outcome="computed").inc()

    if principal <= 100_000:
        bucket = "<=1L"
    elif principal <= 1_000_000:
        bucket = "1L-10L"
    elif principal <= 5_000_000:
        bucket = "10L-50L"
    else:
        bucket = "50L+"

    principal_bucket_counter.labels(bucket=bucket).inc()


def record_rejection(kind: str) -> None:
    """Record an input rejected before computation"""
    calculation_counter.labels(outcome="rejected").inc()
    validation_failure_counter.labels(kind=kind).inc()
