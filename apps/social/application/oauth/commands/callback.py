"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.

State machine:
    ProviderLookup → StateDecoded → (error 파라미터) Redirected
                                  → Exchanged → UserInfoFetched → UserResolved
    어느 단계든 실패하면 해당 OAuthFlowError로 종료합니다. 사용자 생성 전까지는
    로컬 상태를 변경하지 않으므로 롤백이 필요 없습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from apps.social.application.oauth.dto import (
    OAuthCallbackRequest,
    OAuthCallbackResponse,
    OAuthLoginUser,
)
from apps.social.application.oauth.exceptions import (
    OAuthProviderError,
    StateDecodeError,
    TokenExchangeError,
    UserInfoFetchError,
    UserResolutionError,
)
from apps.social.application.oauth.services import (
    build_error_redirect,
    lookup_provider,
    parse_callback_state,
)

if TYPE_CHECKING:
    from apps.social.application.oauth.ports import OAuthProvider, UserResolver

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor (지휘자).

    Workflow:
        1. 프로바이더 조회
        2. state 디코딩 → callback / redirect_to
        3. 프로바이더 error 파라미터가 있으면 `{callback}?error=...` redirect
        4. 인증 코드 → 토큰 교환 (단일 시도)
        5. 사용자 정보 조회
        6. 사용자 조회/생성 (UserResolver)

    Dependencies:
        - providers: 읽기 전용 프로바이더 레지스트리
        - user_resolver: email 기준 find-or-create
    """

    def __init__(
        self,
        providers: Mapping[str, "OAuthProvider"],
        user_resolver: "UserResolver",
    ) -> None:
        self._providers = providers
        self._user_resolver = user_resolver

    async def execute(self, request: OAuthCallbackRequest) -> OAuthCallbackResponse:
        """OAuth 콜백을 처리합니다.

        Raises:
            ProviderNotFoundError: 미등록 프로바이더
            StateDecodeError: state 디코딩/파싱 실패
            TokenExchangeError: 토큰 교환 실패
            UserInfoFetchError: 사용자 정보 조회 실패
            UserResolutionError: 사용자 조회/생성 실패
        """
        # 1. 프로바이더 조회
        provider = lookup_provider(self._providers, request.provider)

        # 2. state 디코딩
        try:
            target = parse_callback_state(request.state)
        except StateDecodeError as e:
            logger.error(
                "Failed to get callback info",
                extra={"provider": provider.name, "error": e.reason},
            )
            raise

        # 3. 프로바이더 오류 → callback으로 redirect
        if request.error:
            redirect_url = build_error_redirect(target.callback, request.error)
            logger.warning(
                "OAuth2 provider reported an error",
                extra={"provider": provider.name, "oauth_error": request.error},
            )
            return OAuthCallbackResponse(
                redirect_url=redirect_url,
                redirect_to=target.redirect_to,
            )

        # 4. 토큰 교환
        if not request.code:
            logger.error(
                "Failed to exchange OAuth2 code for token",
                extra={"provider": provider.name, "error": "authorization code is missing"},
            )
            raise TokenExchangeError("authorization code is missing")
        try:
            token = await provider.exchange_code(request.code)
        except OAuthProviderError as e:
            logger.error(
                "Failed to exchange OAuth2 code for token",
                extra={"provider": provider.name, "error": e.reason},
            )
            raise TokenExchangeError(e.message) from e

        # 5. 사용자 정보 조회
        try:
            user_info = await provider.fetch_user_info(token)
        except OAuthProviderError as e:
            logger.error(
                "Failed to get user info from OAuth2 provider",
                extra={"provider": provider.name, "error": e.reason},
            )
            raise UserInfoFetchError(e.message) from e

        # 6. 사용자 조회/생성
        try:
            user = await self._user_resolver.execute(
                email=user_info.email,
                username=user_info.username,
            )
        except Exception as e:
            logger.error(
                "Failed to find or create user",
                extra={
                    "provider": provider.name,
                    "email": user_info.email,
                    "username": user_info.username,
                    "error": str(e),
                },
            )
            raise UserResolutionError(str(e)) from e

        logger.info(
            "OAuth login successful",
            extra={"provider": provider.name, "user_id": str(user.id)},
        )
        return OAuthCallbackResponse(
            user=OAuthLoginUser(id=user.id, username=user.username, email=user.email),
            redirect_to=target.redirect_to,
        )
