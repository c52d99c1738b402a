"""Users HTTP 라우트 테스트."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from apps.social.application.users.dto import UserDTO
from apps.social.application.users.exceptions import UserNotFoundError
from apps.social.main import create_app
from apps.social.setup.dependencies import get_user_query


@pytest.fixture
def query() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(settings, query: AsyncMock) -> TestClient:
    app = create_app(settings)
    app.dependency_overrides[get_user_query] = lambda: query
    return TestClient(app)


class TestUsersRoutes:
    def test_get_user(self, client: TestClient, query: AsyncMock, sample_user) -> None:
        query.execute.return_value = UserDTO.from_entity(sample_user)

        response = client.get(f"/api/users/{sample_user.id}")

        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"
        assert set(response.json()) == {"id", "username", "email", "createdAt", "updatedAt"}

    def test_invalid_id(self, client: TestClient, query: AsyncMock) -> None:
        response = client.get("/api/users/123")

        assert response.status_code == 400
        assert response.json() == "Invalid user ID format"
        query.execute.assert_not_awaited()

    def test_missing_user(self, client: TestClient, query: AsyncMock) -> None:
        missing = uuid4()
        query.execute.side_effect = UserNotFoundError(missing)

        response = client.get(f"/api/users/{missing}")

        assert response.status_code == 404
