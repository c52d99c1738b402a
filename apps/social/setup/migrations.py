"""Startup Migrations.

migrate_on_startup=true 이면 기동 시 Alembic `upgrade head`를 실행합니다.
Alembic은 동기 API이므로 lifespan에서 asyncio.to_thread로 호출합니다.
"""

from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from apps.social.setup.config import Settings

logger = logging.getLogger(__name__)


def build_alembic_config(settings: Settings) -> Config:
    script_location = Path(settings.migration_source)
    ini_path = script_location / "alembic.ini"

    config = Config(str(ini_path)) if ini_path.is_file() else Config()
    config.set_main_option("script_location", str(script_location))
    # '%' 는 ConfigParser interpolation 문자
    config.set_main_option("sqlalchemy.url", settings.database_url.replace("%", "%%"))
    config.attributes["configure_logger"] = False
    return config


def run_migrations(settings: Settings) -> None:
    """스키마를 최신 리비전으로 업그레이드합니다."""
    logger.info("Running database migrations", extra={"source": settings.migration_source})
    command.upgrade(build_alembic_config(settings), "head")
    logger.info("Database migrations applied")
