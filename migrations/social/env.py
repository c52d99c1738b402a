"""Alembic Environment Configuration for Social Service.

Usage:
    cd migrations/social
    alembic upgrade head
    alembic downgrade -1
    alembic current

기동 시에는 apps.social.setup.migrations.run_migrations()가 같은 env를 사용합니다.
"""

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

# 프로젝트 루트를 path에 추가
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import apps.social.infrastructure.persistence_postgres.mappings  # noqa: E402,F401 (테이블 등록)
from apps.social.infrastructure.persistence_postgres.registry import metadata  # noqa: E402

# Alembic Config 객체
config = context.config

# 로깅 설정 (CLI 실행 시에만, 애플리케이션 기동 시에는 앱 로깅 유지)
if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = metadata


def get_url() -> str:
    """DB URL (Config 옵션 > SOCIAL_DATABASE_URL)."""
    url = config.get_main_option("sqlalchemy.url") or os.getenv("SOCIAL_DATABASE_URL", "")
    # asyncpg URL을 psycopg2로 변환
    if url.startswith("postgresql+asyncpg://"):
        url = url.replace("postgresql+asyncpg://", "postgresql://", 1)
    return url


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
