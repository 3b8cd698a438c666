"""Prometheus metrics for the forwarder."""

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

PUBLISH_OK = "ok"
PUBLISH_NOT_OK = "not_ok"


class ForwarderMetrics:
    """Process-wide metrics, registered on a dedicated registry.

    prometheus_client guards every metric with a lock, so one instance can be
    shared by all in-flight requests.
    """

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry or CollectorRegistry()

        self.http_duration = Histogram(
            "http_response_time_seconds",
            "Duration of HTTP requests.",
            registry=self.registry,
        )
        self.http_requests = Counter(
            "http_request_total",
            "Total number of http requests",
            ["response_code"],
            registry=self.registry,
        )
        self.broker_requests = Counter(
            "amq_total_requests",
            "Total number of total requests done to activeMQ",
            ["result"],
            registry=self.registry,
        )
        # Both result series are exported at zero before the first publish
        for result in (PUBLISH_OK, PUBLISH_NOT_OK):
            self.broker_requests.labels(result)

    def record_publish(self, ok: bool) -> None:
        self.broker_requests.labels(PUBLISH_OK if ok else PUBLISH_NOT_OK).inc()

    def record_response(self, status_code: int) -> None:
        self.http_requests.labels(str(status_code)).inc()

    def render(self) -> bytes:
        """Render the registry in the Prometheus text exposition format."""
        return generate_latest(self.registry)
