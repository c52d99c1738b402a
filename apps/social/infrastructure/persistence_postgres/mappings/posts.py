"""Posts ORM Mapping."""

from sqlalchemy import Column, DateTime, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.social.infrastructure.persistence_postgres.registry import mapper_registry

posts_table = Table(
    "posts",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    ),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_posts_mapper() -> None:
    """Posts 매퍼 시작."""
    from apps.social.domain.entities.post import Post

    if hasattr(Post, "__mapper__"):
        return

    mapper_registry.map_imperatively(Post, posts_table)
