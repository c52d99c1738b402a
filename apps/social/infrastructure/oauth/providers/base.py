"""OAuth Provider Base Class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlencode

import httpx

from apps.social.application.oauth.exceptions import OAuthProviderError
from apps.social.application.oauth.ports import AuthorizationConfig, OAuthToken, OAuthUserInfo

logger = logging.getLogger(__name__)


class BaseOAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    요청마다 httpx.AsyncClient를 열고 닫습니다. 요청 태스크가 취소되면
    진행 중인 프로바이더 호출도 함께 취소됩니다.
    """

    name: str
    auth_url: str
    token_url: str
    userinfo_url: str

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            timeout: HTTP 타임아웃 (None이면 타임아웃 없음)
            transport: 테스트용 httpx transport (MockTransport 등)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self._timeout = timeout
        self._transport = transport

    @property
    def default_scopes(self) -> tuple[str, ...]:
        """기본 스코프."""
        return ()

    def authorization_config(self) -> AuthorizationConfig:
        return AuthorizationConfig(
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
            scopes=self.default_scopes,
            auth_url=self.auth_url,
            token_url=self.token_url,
            userinfo_url=self.userinfo_url,
        )

    def build_authorization_url(self, state: str) -> str:
        params = {
            "access_type": "offline",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.default_scopes),
            "state": state,
        }
        return f"{self.auth_url}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> OAuthToken:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        payload = await self._request_json(
            "POST",
            self.token_url,
            data=data,
            headers={"Accept": "application/json"},
        )
        if not isinstance(payload, dict):
            raise OAuthProviderError(self.name, "unexpected token response")

        access_token = payload.get("access_token")
        if not access_token or not isinstance(access_token, str):
            reason = payload.get("error_description") or payload.get("error") or "missing access_token"
            raise OAuthProviderError(self.name, str(reason))

        return OAuthToken(
            access_token=access_token,
            refresh_token=payload.get("refresh_token"),
            token_type=payload.get("token_type") or "Bearer",
            expires_in=self._expires_in(payload.get("expires_in")),
            raw=payload,
        )

    def _expires_in(self, value: Any) -> int | None:
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise OAuthProviderError(self.name, "invalid expires_in") from e

    @staticmethod
    def _str_field(data: dict[str, Any], key: str) -> str | None:
        """문자열 필드만 사용 (null/숫자/객체는 None)."""
        value = data.get(key)
        return value if isinstance(value, str) and value else None

    @abstractmethod
    async def fetch_user_info(self, token: OAuthToken) -> OAuthUserInfo:
        """사용자 정보 조회."""
        raise NotImplementedError

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        """단일 HTTP 요청 + JSON 디코딩. 실패는 OAuthProviderError로 변환."""
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "OAuth API error",
                extra={"provider": self.name, "status_code": e.response.status_code},
            )
            raise OAuthProviderError(self.name, f"API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("OAuth request failed", extra={"provider": self.name, "error": str(e)})
            raise OAuthProviderError(self.name, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise OAuthProviderError(self.name, "invalid JSON response") from e

    @staticmethod
    def _bearer(token: OAuthToken) -> dict[str, str]:
        return {"Authorization": f"Bearer {token.access_token}"}
