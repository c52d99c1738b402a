"""OAuthProvider Port.

OAuth 프로바이더(Google, GitHub 등)와의 통신을 담당하는 인터페이스입니다.
플로우 Interactor는 이 Protocol에만 의존합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True, slots=True)
class AuthorizationConfig:
    """프로바이더 정적 설정 (기동 시 1회 구성)."""

    client_id: str
    client_secret: str
    redirect_uri: str
    scopes: tuple[str, ...]
    auth_url: str
    token_url: str
    userinfo_url: str


@dataclass(frozen=True, slots=True)
class OAuthToken:
    """OAuth 토큰 데이터."""

    access_token: str
    refresh_token: str | None = None
    token_type: str = "Bearer"
    expires_in: int | None = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class OAuthUserInfo:
    """프로바이더가 제공한 사용자 식별 정보."""

    email: str
    username: str


class OAuthProvider(Protocol):
    """OAuth 프로바이더 인터페이스.

    구현체:
        - GoogleOAuthProvider, GitHubOAuthProvider (infrastructure/oauth/providers/)
    """

    name: str

    def authorization_config(self) -> AuthorizationConfig:
        ...

    def build_authorization_url(self, state: str) -> str:
        """state를 포함한 로그인 URL 생성 (offline access 요청)."""
        ...

    async def exchange_code(self, code: str) -> OAuthToken:
        """인증 코드로 토큰 교환 (단일 요청, 재시도 없음).

        Raises:
            OAuthProviderError: 프로바이더 오류
        """
        ...

    async def fetch_user_info(self, token: OAuthToken) -> OAuthUserInfo:
        """토큰으로 사용자 정보 조회.

        Raises:
            OAuthProviderError: 프로바이더 오류
        """
        ...
