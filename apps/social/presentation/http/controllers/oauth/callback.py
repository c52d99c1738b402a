"""Callback Controller.

OAuth 콜백 처리 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.social.application.oauth.commands import OAuthCallbackInteractor
from apps.social.application.oauth.dto import OAuthCallbackRequest
from apps.social.application.oauth.exceptions import OAuthFlowError, ProviderNotFoundError
from apps.social.presentation.http.schemas import LoginUserResponse
from apps.social.setup.dependencies import get_oauth_callback_interactor
from apps.social.setup.metrics import record_oauth_flow

router = APIRouter()


@router.get(
    "/oauth/{provider}/callback",
    response_model=LoginUserResponse,
    summary="OAuth 콜백 처리",
)
async def callback(
    provider: str,
    code: str | None = Query(None, description="OAuth 인증 코드"),
    state: str | None = Query(None, description="base64 인코딩된 callback URL"),
    error: str | None = Query(None, description="프로바이더 오류"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> LoginUserResponse | RedirectResponse:
    """OAuth 콜백을 처리합니다.

    1. state 디코딩
    2. 프로바이더 error가 있으면 `{callback}?error=...`로 307 redirect
    3. 토큰 교환 → 사용자 정보 조회 → 사용자 조회/생성
    4. `{id, username, email}` 반환 (토큰은 발급하지 않음)
    """
    try:
        result = await interactor.execute(
            OAuthCallbackRequest(provider=provider, code=code, state=state, error=error)
        )
    except OAuthFlowError as e:
        label = "unknown" if isinstance(e, ProviderNotFoundError) else provider
        record_oauth_flow(label, e.step, "error")
        raise

    if result.redirect_url is not None:
        record_oauth_flow(provider, "callback", "provider_error")
        return RedirectResponse(url=result.redirect_url, status_code=307)

    record_oauth_flow(provider, "callback", "success")
    return LoginUserResponse.model_validate(result.user)
