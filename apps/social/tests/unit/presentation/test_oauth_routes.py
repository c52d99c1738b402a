"""OAuth HTTP 라우트 테스트 (TestClient + dependency_overrides)."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock
from urllib.parse import parse_qs, urlsplit
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from apps.social.application.oauth.services import decode_state, encode_state
from apps.social.application.users.dto import UserDTO
from apps.social.infrastructure.oauth import ProviderRegistry
from apps.social.main import create_app
from apps.social.setup.dependencies import (
    get_find_or_create_user_interactor,
    get_provider_registry,
)

CALLBACK = "https://app.example.com/done"


@pytest.fixture
def user_resolver() -> AsyncMock:
    resolver = AsyncMock()

    async def _resolve(email: str, username: str) -> UserDTO:
        now = datetime.now(timezone.utc)
        return UserDTO(id=uuid4(), username=username, email=email, created_at=now, updated_at=now)

    resolver.execute.side_effect = _resolve
    return resolver


@pytest.fixture
def client(settings, fake_provider, user_resolver) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[get_provider_registry] = lambda: ProviderRegistry([fake_provider])
    app.dependency_overrides[get_find_or_create_user_interactor] = lambda: user_resolver
    return TestClient(app)


class TestStartRoute:
    def test_redirects_to_provider(self, client: TestClient) -> None:
        response = client.get("/api/login/oauth/google", follow_redirects=False)

        assert response.status_code == 307
        location = response.headers["location"]
        query = parse_qs(urlsplit(location).query)
        assert query["access_type"] == ["offline"]
        assert decode_state(query["state"][0]) == "http://localhost:8080/api/oauth/debug/token"

    def test_redirect_param_appended_to_default_callback(self, client: TestClient) -> None:
        response = client.get("/api/login/oauth/google?r=foo", follow_redirects=False)

        state = parse_qs(urlsplit(response.headers["location"]).query)["state"][0]
        assert decode_state(state) == "http://localhost:8080/api/oauth/debug/token?r=foo"

    def test_explicit_callback(self, client: TestClient) -> None:
        response = client.get(
            "/api/login/oauth/google",
            params={"c": CALLBACK, "r": "/home"},
            follow_redirects=False,
        )

        state = parse_qs(urlsplit(response.headers["location"]).query)["state"][0]
        assert decode_state(state) == f"{CALLBACK}?r=/home"

    def test_unknown_provider_404(self, client: TestClient, fake_provider) -> None:
        response = client.get("/api/login/oauth/facebook", follow_redirects=False)

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert response.json() == "OAuth2 provider 'facebook' not found"
        assert fake_provider.authorize_calls == []


class TestCallbackRoute:
    def test_success_returns_user(self, client: TestClient, user_resolver: AsyncMock) -> None:
        response = client.get(
            "/api/oauth/google/callback",
            params={"code": "alice", "state": encode_state(CALLBACK)},
        )

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"id", "username", "email"}
        assert body["email"] == "alice@example.com"
        assert body["username"] == "alice"
        user_resolver.execute.assert_awaited_once()

    def test_provider_error_redirects(self, client: TestClient, fake_provider) -> None:
        response = client.get(
            "/api/oauth/google/callback",
            params={"state": encode_state(f"{CALLBACK}?r=/home"), "error": "access_denied"},
            follow_redirects=False,
        )

        assert response.status_code == 307
        assert response.headers["location"] == f"{CALLBACK}?error=access_denied"
        assert fake_provider.exchange_calls == []

    def test_invalid_state_500(self, client: TestClient, fake_provider) -> None:
        response = client.get(
            "/api/oauth/google/callback",
            params={"code": "alice", "state": "not-base64!"},
        )

        assert response.status_code == 500
        assert response.json().startswith("Failed to get callback info: ")
        assert fake_provider.exchange_calls == []

    def test_unknown_provider_404(self, client: TestClient) -> None:
        response = client.get(
            "/api/oauth/unknown/callback",
            params={"code": "alice", "state": encode_state(CALLBACK)},
        )

        assert response.status_code == 404

    def test_user_resolution_failure_500(
        self,
        client: TestClient,
        user_resolver: AsyncMock,
    ) -> None:
        user_resolver.execute.side_effect = RuntimeError("db down")

        response = client.get(
            "/api/oauth/google/callback",
            params={"code": "alice", "state": encode_state(CALLBACK)},
        )

        assert response.status_code == 500
        assert response.json() == "Failed to find or create user: db down"


class TestDebugTokenRoute:
    def test_echoes_query_when_debug(self, client: TestClient) -> None:
        response = client.get("/api/oauth/debug/token", params={"r": "/home", "error": "x"})

        assert response.status_code == 200
        assert response.json() == {"r": "/home", "error": "x"}

    def test_not_registered_without_debug(self, settings) -> None:
        app = create_app(settings.model_copy(update={"debug": False}))

        response = TestClient(app).get("/api/oauth/debug/token")

        assert response.status_code == 404
