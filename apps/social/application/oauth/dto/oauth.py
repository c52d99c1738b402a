"""OAuth DTOs."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class OAuthStartRequest:
    """OAuth 로그인 시작 요청."""

    provider: str
    callback: str | None = None  # c
    redirect_to: str | None = None  # r


@dataclass(frozen=True, slots=True)
class OAuthStartResponse:
    """OAuth 로그인 시작 응답."""

    authorization_url: str
    state: str
    callback: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청."""

    provider: str
    code: str | None = None
    state: str | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class OAuthLoginUser:
    """로그인된 사용자."""

    id: UUID
    username: str
    email: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackResponse:
    """OAuth 콜백 결과.

    프로바이더 오류 시 redirect_url만, 성공 시 user만 채워집니다.
    """

    user: OAuthLoginUser | None = None
    redirect_url: str | None = None
    redirect_to: str | None = None
