"""ProviderRegistry 테스트."""

import pytest

from apps.social.infrastructure.oauth import (
    GitHubOAuthProvider,
    GoogleOAuthProvider,
    ProviderRegistry,
)


class TestProviderRegistry:
    def test_from_settings_registers_google_only(self, settings) -> None:
        registry = ProviderRegistry.from_settings(settings)

        assert list(registry) == ["google"]
        assert isinstance(registry["google"], GoogleOAuthProvider)
        assert registry["google"].redirect_uri == "http://localhost:8080/api/oauth/google/callback"

    def test_from_settings_registers_github_when_configured(self, settings) -> None:
        settings = settings.model_copy(
            update={"github_client_id": "gh-id", "github_client_secret": "gh-secret"}
        )

        registry = ProviderRegistry.from_settings(settings)

        assert set(registry) == {"google", "github"}
        assert isinstance(registry["github"], GitHubOAuthProvider)
        assert registry["github"].client_secret == "gh-secret"

    def test_lookup_is_exact(self, settings) -> None:
        registry = ProviderRegistry.from_settings(settings)

        assert registry.get("GOOGLE") is None
        assert "google" in registry

    def test_is_read_only(self, settings) -> None:
        registry = ProviderRegistry.from_settings(settings)

        with pytest.raises(TypeError):
            registry["evil"] = registry["google"]  # type: ignore[index]

    def test_duplicate_names_rejected(self, fake_provider, make_provider) -> None:
        with pytest.raises(ValueError):
            ProviderRegistry([fake_provider, make_provider("google")])
