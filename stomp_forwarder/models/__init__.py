"""Data models for the STOMP forwarder."""

from stomp_forwarder.models.alert import Alert, AlertBatch

__all__ = [
    "Alert",
    "AlertBatch",
]
