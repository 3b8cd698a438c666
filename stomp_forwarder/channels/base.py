"""Base class for broker channels."""

from abc import ABC, abstractmethod

from stomp_forwarder.models.alert import Alert


class BaseChannel(ABC):
    """Abstract base class for channels that deliver single alerts to a topic."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Channel name identifier."""
        ...

    @abstractmethod
    def publish(self, topic: str, alert: Alert) -> None:
        """Deliver one alert to the given topic.

        Raises PublishError (or a subclass) when delivery fails.
        """
        ...
