"""Forwarding service - relays every alert of a webhook payload to a broker topic."""

import logging

from pydantic import BaseModel

from stomp_forwarder.channels.base import BaseChannel
from stomp_forwarder.errors import DeliveryError, PublishError
from stomp_forwarder.metrics import ForwarderMetrics
from stomp_forwarder.sources import alertmanager

logger = logging.getLogger(__name__)


class ForwardResult(BaseModel):
    """Outcome of a fully successful forward call."""

    topic: str
    published: int


class ForwardingService:
    """Decodes webhook payloads and publishes their alerts one by one."""

    def __init__(self, channel: BaseChannel, metrics: ForwarderMetrics):
        self._channel = channel
        self._metrics = metrics

    def forward(self, topic: str, raw: bytes) -> ForwardResult:
        """Decode ``raw`` and publish each alert to ``topic`` in payload order.

        A failing alert does not stop the remaining ones from being published;
        the call raises DeliveryError afterwards if any of them failed.

        Raises:
            DecodeError: the payload could not be decoded, nothing was published
            DeliveryError: at least one alert could not be published
        """
        batch = alertmanager.decode(raw)
        logger.debug(f"Forwarding {len(batch.alerts)} alert(s) to topic {topic} (status={batch.status})")

        failed = 0
        for alert in batch.alerts:
            try:
                self._channel.publish(topic, alert)
            except PublishError as e:
                failed += 1
                self._metrics.record_publish(ok=False)
                logger.error(f"Request for alert {alert.labels} on topic {topic} not successful: {e}")
                continue
            except Exception as e:
                failed += 1
                self._metrics.record_publish(ok=False)
                logger.exception(f"Unexpected error publishing alert {alert.labels} on topic {topic}: {e}")
                continue
            self._metrics.record_publish(ok=True)

        if failed:
            raise DeliveryError(topic, attempted=len(batch.alerts), failed=failed)

        logger.info(f"Forwarded {len(batch.alerts)} alert(s) to topic {topic} via {self._channel.name}")
        return ForwardResult(topic=topic, published=len(batch.alerts))
