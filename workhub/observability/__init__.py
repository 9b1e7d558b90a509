"""Observability package for the WorkHub API."""

from workhub.observability.metrics import (
    increment_in_flight_requests,
    decrement_in_flight_requests,
    observe_request_latency,
    increment_inventory_adjustment,
    increment_order_status_transition,
    increment_error,
    get_metrics_content,
    InventoryOperation,
    MetricsErrorType,
)

__all__ = [
    "increment_in_flight_requests",
    "decrement_in_flight_requests",
    "observe_request_latency",
    "increment_inventory_adjustment",
    "increment_order_status_transition",
    "increment_error",
    "get_metrics_content",
    "InventoryOperation",
    "MetricsErrorType",
]
