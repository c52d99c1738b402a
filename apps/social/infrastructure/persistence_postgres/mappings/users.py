"""Users ORM Mapping.

User 도메인 엔티티와 users 테이블의 매핑입니다. email은 unique 자연키입니다.
"""

from sqlalchemy import Column, DateTime, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.social.infrastructure.persistence_postgres.registry import mapper_registry

users_table = Table(
    "users",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", Text, nullable=False),
    Column("email", Text, nullable=False, unique=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_users_mapper() -> None:
    """Users 매퍼 시작.

    Note:
        Imperative Mapping 사용.
        도메인 엔티티가 SQLAlchemy에 의존하지 않도록 합니다.
    """
    from apps.social.domain.entities.user import User

    # 이미 매핑된 경우 스킵
    if hasattr(User, "__mapper__"):
        return

    mapper_registry.map_imperatively(User, users_table)
