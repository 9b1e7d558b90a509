"""
Prometheus Metrics Endpoint.

DATA FLOW:
    observability/metrics.py         This file
    ────────────────────────         ─────────
    Define & record metrics ──────►  GET /metrics (Prometheus text format)

Recorded by:
    - MetricsMiddleware (fastapi_app.py): in-flight gauge, request latency
    - exception handlers (fastapi_app.py): errors by type
    - InventoryAdjuster / RestockInventoryHandler: inventory adjustments
    - UpdateOrderStatusHandler: order status transitions

Test with: curl http://localhost:5001/metrics
"""

from fastapi import APIRouter, Response

from workhub.observability.metrics import get_metrics_content

router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Prometheus metrics endpoint. Unauthenticated, like the health checks."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
