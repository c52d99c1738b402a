"""OAuth Provider Registry.

기동 시 설정으로부터 1회 구성되는 읽기 전용 매핑입니다.
구성 이후 변경되지 않으므로 동시 요청에서 락 없이 공유됩니다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

import httpx

from apps.social.infrastructure.oauth.providers import GitHubOAuthProvider, GoogleOAuthProvider

if TYPE_CHECKING:
    from apps.social.application.oauth.ports import OAuthProvider
    from apps.social.setup.config import Settings

logger = logging.getLogger(__name__)


class ProviderRegistry(Mapping[str, "OAuthProvider"]):
    """프로바이더 이름 → 구현체 (immutable)."""

    def __init__(self, providers: Iterable["OAuthProvider"]) -> None:
        entries: dict[str, "OAuthProvider"] = {}
        for provider in providers:
            if provider.name in entries:
                raise ValueError(f"Duplicate OAuth provider: {provider.name}")
            entries[provider.name] = provider
        self._providers = MappingProxyType(entries)

    def __getitem__(self, name: str) -> "OAuthProvider":
        return self._providers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    @classmethod
    def from_settings(
        cls,
        settings: "Settings",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ProviderRegistry":
        """설정으로부터 레지스트리 구성.

        google은 항상 등록, github는 github_client_id가 있을 때만 등록합니다.
        """
        timeout = settings.oauth_http_timeout_seconds
        providers: list["OAuthProvider"] = [
            GoogleOAuthProvider(
                client_id=settings.google_client_id,
                client_secret=settings.google_client_secret,
                redirect_uri=settings.oauth_redirect_uri("google"),
                timeout=timeout,
                transport=transport,
            )
        ]
        if settings.github_client_id:
            providers.append(
                GitHubOAuthProvider(
                    client_id=settings.github_client_id,
                    client_secret=settings.github_client_secret,
                    redirect_uri=settings.oauth_redirect_uri("github"),
                    timeout=timeout,
                    transport=transport,
                )
            )

        registry = cls(providers)
        logger.info("OAuth providers registered", extra={"providers": sorted(registry)})
        return registry
