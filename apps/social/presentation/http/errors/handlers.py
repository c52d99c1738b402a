"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 본문은 JSON 문자열(평문 메시지)이며 별도 에러 코드는 없습니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.social.application.common.exceptions import ApplicationError
from apps.social.application.oauth.exceptions import OAuthFlowError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(OAuthFlowError)
    async def oauth_flow_error_handler(request: Request, exc: OAuthFlowError):
        return JSONResponse(status_code=exc.status_code, content=exc.message)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        if exc.status_code >= 500:
            logger.error(
                "Application error",
                extra={"path": request.url.path, "error": exc.message},
            )
        return JSONResponse(status_code=exc.status_code, content=exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Invalid request body",
            extra={"path": request.url.path, "errors": str(exc.errors())},
        )
        return JSONResponse(status_code=400, content="Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content="Internal server error")
