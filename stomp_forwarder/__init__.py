"""Alertmanager webhook receiver that forwards alerts to STOMP brokers."""

__version__ = "0.1.0"
