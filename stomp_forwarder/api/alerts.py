"""Webhook API for receiving Alertmanager notifications and relaying them to STOMP."""

import logging

from fastapi import APIRouter, Request, Response, status
from starlette.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect

from stomp_forwarder.deps import Forwarder, Metrics
from stomp_forwarder.errors import DecodeError, ForwardError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.post("/{topic}")
async def receive_alerts(
    topic: str,
    request: Request,
    forwarder: Forwarder,
    metrics: Metrics,
) -> Response:
    """Publish every alert of the webhook payload to the given broker topic.

    URL format: /alerts/{topic}

    Answers 200 with an empty body when every alert was published and 500 with
    an empty body otherwise; the failing alerts are only visible in the logs
    and in the amq_total_requests metric.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        with metrics.http_duration.time():
            body = await request.body()
            # Publishing blocks on the broker; once started it runs to completion
            await run_in_threadpool(forwarder.forward, topic, body)
            status_code = status.HTTP_200_OK
    except ClientDisconnect:
        logger.error(f"The request body for topic {topic} could not be read")
    except DecodeError as e:
        logger.error(f"The request body could not be decoded to an alert batch. request body: {body!r}. err: {e}")
    except ForwardError as e:
        logger.error(f"Alerts for topic {topic} not forwarded: {e}")
    except Exception:
        logger.exception(f"Unexpected error while forwarding alerts to topic {topic}")
    finally:
        metrics.record_response(status_code)

    return Response(status_code=status_code)
