"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST

from stomp_forwarder.deps import Metrics

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics_endpoint(metrics: Metrics) -> Response:
    """Expose the forwarder metrics for Prometheus scraping."""
    return Response(content=metrics.render(), media_type=CONTENT_TYPE_LATEST)
