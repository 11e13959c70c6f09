"""Prometheus metrics for the Multifinance service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- multifinance_transactions_total: Transaction attempts by outcome
- multifinance_transaction_principal_total: Principal booked by tenor
- multifinance_limit_checks_total: Limit previews by status
- multifinance_verifications_total: Verification decisions by status

Technical Metrics (for Engineering/SRE):
- multifinance_transaction_latency_seconds: Locked transaction latency
- multifinance_http_requests_total: HTTP requests by endpoint/status
- multifinance_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from decimal import Decimal
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

transactions_total = Counter(
    "multifinance_transactions_total",
    "Total number of transaction creation attempts",
    ["outcome"],  # created, insufficient_limit, limit_not_set, ...
)

transaction_principal_total = Counter(
    "multifinance_transaction_principal_total",
    "Sum of principal (OTR + admin fee) booked in active transactions",
    ["tenor_months"],
)

limit_checks_total = Counter(
    "multifinance_limit_checks_total",
    "Total number of limit previews",
    ["status"],  # approved, rejected
)

verifications_total = Counter(
    "multifinance_verifications_total",
    "Total number of customer verification decisions",
    ["status"],  # VERIFIED, REJECTED
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

transaction_latency = Histogram(
    "multifinance_transaction_latency_seconds",
    "Transaction creation latency in seconds, lock wait included",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

http_requests_total = Counter(
    "multifinance_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "multifinance_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Service Metrics Sinks
# =============================================================================

class TransactionMetrics:
    """
    Metrics sink handed to the partner service.

    Keeps the service free of direct references to the module-level
    collectors so it can be constructed without any observability.
    """

    def record_created(self, tenor_months: int, principal: Decimal) -> None:
        transactions_total.labels(outcome="created").inc()
        transaction_principal_total.labels(tenor_months=str(tenor_months)).inc(
            float(principal)
        )

    def record_rejected(self, reason: str) -> None:
        transactions_total.labels(outcome=reason).inc()

    def record_limit_check(self, status: str) -> None:
        limit_checks_total.labels(status=status).inc()

    @contextmanager
    def track_latency(self) -> Generator[None, None, None]:
        with track_transaction_latency():
            yield


class VerificationMetrics:
    """Metrics sink handed to the admin service."""

    def record_verification(self, status: str) -> None:
        verifications_total.labels(status=status).inc()


# =============================================================================
# Helper Functions
# =============================================================================

@contextmanager
def track_transaction_latency() -> Generator[None, None, None]:
    """Context manager to track transaction creation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        transaction_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
