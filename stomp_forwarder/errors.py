"""Exceptions raised while forwarding alerts to the broker."""


class ForwarderError(Exception):
    """Base class for all forwarder errors."""


class ForwardError(ForwarderError):
    """A forward call (decode and publish of one webhook payload) failed."""


class DecodeError(ForwardError):
    """The webhook payload is not valid JSON or does not match the alert batch shape."""


class DeliveryError(ForwardError):
    """One or more alerts of a batch could not be published."""

    def __init__(self, topic: str, attempted: int, failed: int):
        self.topic = topic
        self.attempted = attempted
        self.failed = failed
        super().__init__(f"{failed} of {attempted} alert(s) could not be published to topic {topic}")


class PublishError(ForwarderError):
    """Publishing a single alert to the broker failed."""


class ConnectError(PublishError):
    """The broker could not be reached or rejected the credentials."""


class SendError(PublishError):
    """The SEND frame could not be transmitted after connecting."""
