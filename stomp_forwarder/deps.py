"""FastAPI dependencies for the services built at startup."""

from typing import Annotated

from fastapi import Depends, Request

from stomp_forwarder.metrics import ForwarderMetrics
from stomp_forwarder.services.forwarder import ForwardingService


def get_forwarder(request: Request) -> ForwardingService:
    """Get the forwarding service created by the application factory."""
    return request.app.state.forwarder


def get_metrics(request: Request) -> ForwarderMetrics:
    """Get the process-wide metrics recorder."""
    return request.app.state.metrics


# Type aliases for cleaner route signatures
Forwarder = Annotated[ForwardingService, Depends(get_forwarder)]
Metrics = Annotated[ForwarderMetrics, Depends(get_metrics)]
