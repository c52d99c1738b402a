"""Social API Application Entry Point.

OAuth2 로그인 + 게시글 CRUD 서비스입니다.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (OAuth provider 호출)
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.social.infrastructure.oauth import ProviderRegistry
from apps.social.presentation.http.controllers import debug_router, root_router
from apps.social.presentation.http.errors import register_exception_handlers
from apps.social.setup.config import ConfigLogBuffer, ConfigurationError, Settings, load_settings
from apps.social.setup.constants import SERVICE_VERSION
from apps.social.setup.logging import setup_logging
from apps.social.setup.metrics import register_metrics
from apps.social.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    from apps.social.infrastructure.persistence_postgres.mappings import start_all_mappers
    from apps.social.infrastructure.persistence_postgres.session import (
        dispose_engine,
        init_engine,
    )

    settings: Settings = app.state.settings

    # Startup
    settings.validate_required()
    logger.info("Starting Social API", extra={"host": settings.host, "port": settings.port})

    # ORM 매퍼 시작
    start_all_mappers()
    logger.info("ORM mappers initialized")

    if settings.migrate_on_startup:
        from apps.social.setup.migrations import run_migrations

        await asyncio.to_thread(run_migrations, settings)

    init_engine(settings.database_url, echo=settings.debug)

    yield

    # Shutdown
    logger.info("Shutting down Social API")
    await dispose_engine()
    shutdown_tracing()


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    if settings is None:
        settings, config_buffer = load_settings()
    else:
        config_buffer = ConfigLogBuffer()

    # 로깅 설정 후 버퍼링된 설정 경고 출력
    setup_logging(
        settings.resolved_log_level,
        json_format=settings.log_format == "json",
        environment=settings.environment,
    )
    config_buffer.flush(logger)

    # OpenTelemetry 분산 트레이싱 설정
    configure_tracing(settings)
    instrument_httpx(settings)

    app = FastAPI(
        title=settings.app_name,
        description="OAuth2 로그인 + 게시글 API",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.providers = ProviderRegistry.from_settings(settings)

    # CORS 설정
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app, settings)

    # Prometheus (/metrics/status)
    register_metrics(app)

    # 라우터 등록
    app.include_router(root_router)
    if settings.debug:
        app.include_router(debug_router, prefix="/api", tags=["debug"])

    return app


# 애플리케이션 인스턴스
app = create_app()


def run() -> None:
    """서버 실행 (필수 설정 누락 시 안내 메시지 출력 후 종료)."""
    import uvicorn

    settings = app.state.settings
    try:
        settings.validate_required()
    except ConfigurationError as e:
        print(e.render(), file=sys.stderr)
        sys.exit(1)

    uvicorn.run(
        "apps.social.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
    )


if __name__ == "__main__":
    run()
