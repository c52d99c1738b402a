"""OAuthStart Command.

OAuth 로그인 시작 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from apps.social.application.oauth.dto import OAuthStartRequest, OAuthStartResponse
from apps.social.application.oauth.services import (
    build_start_callback,
    encode_state,
    lookup_provider,
)

if TYPE_CHECKING:
    from apps.social.application.oauth.ports import OAuthProvider

logger = logging.getLogger(__name__)


class OAuthStartInteractor:
    """OAuth 로그인 시작 Interactor.

    Workflow:
        1. 프로바이더 조회 (미등록 시 ProviderNotFoundError)
        2. callback URL 구성 (c 미지정 시 default_callback, r 지정 시 쿼리로 추가)
        3. callback URL을 base64로 인코딩하여 state 생성
        4. 프로바이더 인증 URL 반환
    """

    def __init__(
        self,
        providers: Mapping[str, "OAuthProvider"],
        default_callback: str,
    ) -> None:
        self._providers = providers
        self._default_callback = default_callback

    def execute(self, request: OAuthStartRequest) -> OAuthStartResponse:
        """
        Raises:
            ProviderNotFoundError: 미등록 프로바이더
        """
        provider = lookup_provider(self._providers, request.provider)

        callback = build_start_callback(
            self._default_callback,
            callback=request.callback,
            redirect_to=request.redirect_to,
        )
        state = encode_state(callback)
        authorization_url = provider.build_authorization_url(state)

        logger.info(
            "Redirecting to OAuth2 provider",
            extra={"provider": provider.name, "url": authorization_url},
        )
        return OAuthStartResponse(
            authorization_url=authorization_url,
            state=state,
            callback=callback,
        )
