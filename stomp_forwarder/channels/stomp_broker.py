"""STOMP broker channel (ActiveMQ, Artemis, RabbitMQ STOMP plugin, ...)."""

import logging
from typing import Any, Callable

import stomp
from stomp.exception import StompException

from stomp_forwarder.channels.base import BaseChannel
from stomp_forwarder.config import get_settings
from stomp_forwarder.errors import ConnectError, SendError
from stomp_forwarder.models.alert import Alert

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"

ConnectionFactory = Callable[[list[tuple[str, int]]], Any]


class StompChannel(BaseChannel):
    """Publish alerts as JSON messages, opening a fresh connection per alert."""

    def __init__(
        self,
        host_and_ports: list[tuple[str, int]] | None = None,
        username: str | None = None,
        password: str | None = None,
        connection_factory: ConnectionFactory = stomp.Connection,
    ):
        if host_and_ports is None or username is None or password is None:
            settings = get_settings()
            host_and_ports = settings.stomp_host_and_ports if host_and_ports is None else host_and_ports
            username = settings.stomp_user if username is None else username
            password = settings.stomp_pass if password is None else password
        self._host_and_ports = host_and_ports
        self._username = username
        self._password = password
        self._connection_factory = connection_factory

    @property
    def name(self) -> str:
        return "stomp"

    def _connect(self) -> Any:
        try:
            conn = self._connection_factory(self._host_and_ports)
        except (StompException, OSError) as e:
            raise ConnectError(f"could not create stomp connection: {e}") from e
        try:
            conn.connect(self._username, self._password, wait=True)
        except (StompException, OSError) as e:
            logger.error(f"Error while connecting to stomp {self._host_and_ports}: {e!r}")
            self._disconnect(conn)
            raise ConnectError(f"error while connecting to stomp: {e!r}") from e
        logger.debug(f"Connected to stomp endpoint {self._host_and_ports}")
        return conn

    def _disconnect(self, conn: Any) -> None:
        try:
            conn.disconnect()
        except (StompException, OSError) as e:
            logger.warning(f"Error while disconnecting from stomp: {e!r}")

    def publish(self, topic: str, alert: Alert) -> None:
        """Send one alert to the topic: connect, login, send, disconnect."""
        message = alert.to_json()
        logger.info(f"amq request {{topic: {topic}, message: {message}}}")

        conn = self._connect()
        try:
            conn.send(destination=topic, body=message, content_type=CONTENT_TYPE)
        except (StompException, OSError) as e:
            logger.error(f"Failed to send message to topic {topic}: {e!r}")
            raise SendError(f"failed to send message to {topic}: {e!r}") from e
        finally:
            self._disconnect(conn)
