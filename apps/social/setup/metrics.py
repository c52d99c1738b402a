"""Prometheus Metrics.

애플리케이션 레벨 HTTP 메트릭은 수집하지 않고 OAuth 플로우 카운터만 노출합니다.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

PROMETHEUS_METRICS_PATH = "/metrics/status"
_FLAG_ATTR = "_social_metrics_registered"

REGISTRY = CollectorRegistry(auto_describe=True)

OAUTH_FLOWS_TOTAL = Counter(
    "social_oauth_flows_total",
    "OAuth flow outcomes by provider and step",
    labelnames=("provider", "step", "outcome"),
    registry=REGISTRY,
)


def record_oauth_flow(provider: str, step: str, outcome: str) -> None:
    OAUTH_FLOWS_TOTAL.labels(provider=provider, step=step, outcome=outcome).inc()


def register_metrics(app: FastAPI, metrics_path: str = PROMETHEUS_METRICS_PATH) -> None:
    """Attach metrics route exposing the private registry."""
    if getattr(app.state, _FLAG_ATTR, False):
        return

    @app.get(metrics_path, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        payload = generate_latest(REGISTRY)
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    setattr(app.state, _FLAG_ATTR, True)
