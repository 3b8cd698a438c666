"""Prometheus Alertmanager webhook payload decoder."""

from pydantic import ValidationError
from pydantic_core import from_json

from stomp_forwarder.errors import DecodeError
from stomp_forwarder.models.alert import AlertBatch


def decode(raw: bytes) -> AlertBatch:
    """Decode a raw webhook body into an AlertBatch.

    Missing fields fall back to empty values; malformed JSON (including the
    NaN/Infinity literals), a non-object document or a mistyped known field
    raise DecodeError.
    """
    try:
        data = from_json(raw, allow_inf_nan=False)
    except ValueError as e:
        raise DecodeError(f"invalid JSON payload: {e}") from e
    try:
        return AlertBatch.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"invalid alertmanager payload: {e}") from e
