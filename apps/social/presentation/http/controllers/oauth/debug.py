"""Debug Token Controller.

c 파라미터 없이 로그인을 시작했을 때의 기본 callback 입니다.
debug 설정이 켜진 경우에만 등록됩니다.
"""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/oauth/debug/token", summary="디버그용 callback (쿼리 echo)")
async def debug_token(request: Request) -> dict[str, str]:
    return dict(request.query_params)
