"""
Metrics Endpoint.

Exposes the Prometheus metrics of the service in the text exposition format.
"""

from fastapi import APIRouter, Response

from customer_data_service.core.metrics import CONTENT_TYPE_LATEST, get_metrics

router = APIRouter()


@router.get(
    "/metrics",
    summary="Prometheus Metrics",
    description="Request and customer operation metrics in the Prometheus text format.",
    response_class=Response,
)
async def metrics() -> Response:
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)
