"""
Prometheus Metrics for the WorkHub API.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus

METRIC TYPES:
    - Gauge: Value goes up/down (current count, e.g., in-flight requests)
    - Counter: Value only goes up (total count, e.g., inventory adjustments)
    - Histogram: Distribution (for percentiles like P95, e.g., latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
IN_FLIGHT_REQUESTS = Gauge(
    "workhub_in_flight_requests", "Number of HTTP requests currently being handled"
)

REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5],
)

INVENTORY_ADJUSTMENTS_TOTAL = Counter(
    "workhub_inventory_adjustments_total",
    "Inventory adjustments by operation",
    ["operation"],
)

ORDER_STATUS_TRANSITIONS_TOTAL = Counter(
    "workhub_order_status_transitions_total",
    "Order status changes",
    ["from_status", "to_status"],
)

ERRORS_TOTAL = Counter(
    "workhub_errors_total",
    "Total number of errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for workhub_errors_total metric."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    VALIDATION = "validation"
    INVALID_STATE = "invalid_state"
    OUT_OF_STOCK = "out_of_stock"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    RATE_LIMITED = "rate_limited"
    UNEXPECTED = "unexpected"


class InventoryOperation:
    """Operation labels for workhub_inventory_adjustments_total."""

    RESERVE = "reserve"
    RELEASE = "release"
    DEDUCT = "deduct"
    RESTOCK = "restock"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def increment_in_flight_requests():
    """Call when a request STARTS. Integration point: fastapi_app.MetricsMiddleware"""
    IN_FLIGHT_REQUESTS.inc()


def decrement_in_flight_requests():
    """Call when a request ENDS (in finally block)."""
    IN_FLIGHT_REQUESTS.dec()


def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_inventory_adjustment(operation: str):
    """Integration point: application/services/inventory_adjuster.py"""
    INVENTORY_ADJUSTMENTS_TOTAL.labels(operation=operation).inc()


def increment_order_status_transition(from_status: str, to_status: str):
    """Integration point: application/commands/orders/update_order_status.py"""
    ORDER_STATUS_TRANSITIONS_TOTAL.labels(
        from_status=from_status, to_status=to_status
    ).inc()


def increment_error(error_type: str):
    """Call when an error is mapped to a response. Integration point: fastapi_app exception handlers"""
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# EXPORT FUNCTIONS
# =============================================================================
def get_metrics_content():
    """Return the Prometheus exposition payload and its content type."""
    return generate_latest(), CONTENT_TYPE_LATEST
