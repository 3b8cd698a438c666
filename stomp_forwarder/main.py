"""STOMP forwarder - FastAPI application relaying Alertmanager webhooks to a STOMP broker."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request

from stomp_forwarder.api.alerts import router as alerts_router
from stomp_forwarder.api.metrics import router as metrics_router
from stomp_forwarder.channels.base import BaseChannel
from stomp_forwarder.channels.stomp_broker import StompChannel
from stomp_forwarder.config import Settings, get_settings, load_settings
from stomp_forwarder.metrics import ForwarderMetrics
from stomp_forwarder.services.forwarder import ForwardingService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Paths left out of the access log
UNLOGGED_PATHS = ("/health", "/metrics")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings

    # Configure logging level
    logging.getLogger().setLevel(settings.log_level)

    logger.info(
        f"configuration {{addr=[{settings.listen_addr}] debug=[{settings.debug}] "
        f"stomp-addr=[{settings.stomp_addr}] stomp-user=[{settings.stomp_user}]}}"
    )
    logger.info("STOMP forwarder started")

    yield

    logger.info("STOMP forwarder stopped")


def create_app(
    settings: Settings | None = None,
    channel: BaseChannel | None = None,
    metrics: ForwarderMetrics | None = None,
) -> FastAPI:
    """Build the application and the services shared by all requests."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Alertmanager STOMP Forwarder",
        description="Relays Alertmanager webhook alerts to STOMP broker topics",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    metrics = metrics or ForwarderMetrics()
    channel = channel or StompChannel(
        host_and_ports=settings.stomp_host_and_ports,
        username=settings.stomp_user,
        password=settings.stomp_pass,
    )
    app.state.settings = settings
    app.state.metrics = metrics
    app.state.forwarder = ForwardingService(channel, metrics)

    @app.middleware("http")
    async def access_log_middleware(request: Request, call_next):
        """Log every request except health probes and metric scrapes."""
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {path} {response.status_code} {elapsed_ms:.1f}ms")
        return response

    app.include_router(alerts_router)
    app.include_router(metrics_router)

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Liveness and readiness probe."""
        return {"health": "ok"}

    return app


app = create_app()


def run() -> None:
    """Run the application using uvicorn, configured from command line flags and env."""
    settings = load_settings()
    logger.info(f"Listening on address [{settings.listen_addr}]")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run()
