"""Health / Metrics 라우트 테스트."""

from fastapi.testclient import TestClient

from apps.social.main import create_app
from apps.social.setup.metrics import REGISTRY


def _lookup_errors() -> float:
    value = REGISTRY.get_sample_value(
        "social_oauth_flows_total",
        {"provider": "unknown", "step": "lookup", "outcome": "error"},
    )
    return value or 0.0


def test_health(settings) -> None:
    response = TestClient(create_app(settings)).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "social-api", "version": "1.0.0"}


def test_metrics_counts_oauth_flows(settings) -> None:
    client = TestClient(create_app(settings))
    before = _lookup_errors()

    client.get("/api/login/oauth/facebook", follow_redirects=False)
    response = client.get("/metrics/status")

    assert response.status_code == 200
    assert "social_oauth_flows_total" in response.text
    assert _lookup_errors() == before + 1
