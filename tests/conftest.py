"""Shared fixtures for the forwarder tests."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from stomp_forwarder.channels.base import BaseChannel
from stomp_forwarder.config import Settings
from stomp_forwarder.errors import ConnectError
from stomp_forwarder.main import create_app
from stomp_forwarder.metrics import ForwarderMetrics
from stomp_forwarder.models.alert import Alert

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"

SAMPLE_PAYLOAD = {
    "alerts": [
        {
            "labels": {"alertname": "Foo"},
            "startsAt": "2024-01-01T00:00:00Z",
            "endsAt": "",
            "annotations": {},
            "generatorURL": "",
        }
    ],
    "status": "firing",
    "receiver": "r",
    "externalURL": "",
    "commonAnnotations": {},
    "commonLabels": {},
    "groupLabels": {},
}


class RecordingChannel(BaseChannel):
    """Channel that records published alerts and fails for selected alertnames."""

    def __init__(self, failing: set[str] | None = None):
        self.failing = failing or set()
        self.attempts: list[tuple[str, Alert]] = []

    @property
    def name(self) -> str:
        return "recording"

    @property
    def delivered(self) -> list[tuple[str, Alert]]:
        return [(t, a) for t, a in self.attempts if a.labels.get("alertname") not in self.failing]

    def publish(self, topic: str, alert: Alert) -> None:
        self.attempts.append((topic, alert))
        if alert.labels.get("alertname") in self.failing:
            raise ConnectError("broker unreachable")


class ExplodingChannel(RecordingChannel):
    """Channel that raises an unexpected error for selected alertnames."""

    def __init__(self, exploding: set[str]):
        super().__init__(failing=exploding)

    def publish(self, topic: str, alert: Alert) -> None:
        self.attempts.append((topic, alert))
        if alert.labels.get("alertname") in self.failing:
            raise RuntimeError("channel bug")


def metric_value(metrics: ForwarderMetrics, name: str, labels: dict[str, str] | None = None) -> float:
    """Read a sample from the metrics registry, treating missing samples as zero."""
    return metrics.registry.get_sample_value(name, labels or {}) or 0.0


@pytest.fixture(scope="module")
def alertmanager_payload() -> bytes:
    """Realistic Alertmanager webhook body with three alerts."""
    return (ARTIFACTS_DIR / "alertmanager.json").read_bytes()


@pytest.fixture
def sample_payload() -> bytes:
    return json.dumps(SAMPLE_PAYLOAD).encode()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        listen_addr="127.0.0.1:9087",
        stomp_addr="broker.test:61613",
        stomp_user="forwarder",
        stomp_pass="s3cret",
    )


@pytest.fixture
def metrics() -> ForwarderMetrics:
    return ForwarderMetrics()


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def client(settings: Settings, channel: RecordingChannel, metrics: ForwarderMetrics) -> Iterator[TestClient]:
    app = create_app(settings=settings, channel=channel, metrics=metrics)
    with TestClient(app) as test_client:
        yield test_client
