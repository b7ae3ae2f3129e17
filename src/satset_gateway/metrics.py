from __future__ import annotations

from prometheus_client import Counter, Histogram, start_http_server

route_requests_total = Counter(
    "satset_route_requests_total",
    "Total requests handled per gateway route",
    labelnames=["route", "status"],
)

route_latency_seconds = Histogram(
    "satset_route_latency_seconds",
    "Gateway route latency (seconds)",
    buckets=[0.1, 0.3, 0.5, 1, 2, 5, 10, 30, 60, 120],
    labelnames=["route"],
)

upstream_attempts_total = Counter(
    "satset_upstream_attempts_total",
    "Outbound Gemini attempts by outcome",
    labelnames=["model", "outcome"],
)


def maybe_start_metrics(*, enable: bool, bind: str, port: int) -> None:
    if not enable:
        return
    start_http_server(port, addr=bind)
