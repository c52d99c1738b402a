"""Start Controller.

OAuth 로그인 시작(프로바이더로 redirect) 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from apps.social.application.oauth.commands import OAuthStartInteractor
from apps.social.application.oauth.dto import OAuthStartRequest
from apps.social.application.oauth.exceptions import OAuthFlowError, ProviderNotFoundError
from apps.social.setup.dependencies import get_oauth_start_interactor
from apps.social.setup.metrics import record_oauth_flow

router = APIRouter()


@router.get(
    "/login/oauth/{provider}",
    status_code=307,
    response_class=RedirectResponse,
    summary="OAuth 로그인 시작",
)
async def start(
    provider: str,
    c: str | None = Query(None, description="로그인 완료 후 callback URL"),
    r: str | None = Query(None, description="callback에 전달할 redirect 경로"),
    interactor: OAuthStartInteractor = Depends(get_oauth_start_interactor),
) -> RedirectResponse:
    """프로바이더 인증 URL로 307 redirect 합니다.

    c가 없으면 `{base_url}/api/oauth/debug/token`이 callback이 되고,
    callback URL 전체가 base64로 인코딩되어 state로 전달됩니다.
    """
    try:
        result = interactor.execute(
            OAuthStartRequest(provider=provider, callback=c or None, redirect_to=r or None)
        )
    except OAuthFlowError as e:
        label = "unknown" if isinstance(e, ProviderNotFoundError) else provider
        record_oauth_flow(label, e.step, "error")
        raise

    record_oauth_flow(provider, "start", "redirect")
    return RedirectResponse(url=result.authorization_url, status_code=307)
