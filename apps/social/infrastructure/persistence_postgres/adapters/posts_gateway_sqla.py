"""SQLAlchemy Posts Gateway.

PostsGateway 포트의 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select

from apps.social.domain.entities.post import Post
from apps.social.infrastructure.persistence_postgres.mappings.posts import posts_table

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlaPostsGateway:
    """SQLAlchemy 기반 Posts Gateway."""

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def list_all(self) -> list[Post]:
        stmt = select(Post).order_by(posts_table.c.created_at.desc(), posts_table.c.id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, post_id: UUID) -> Post | None:
        result = await self._session.execute(select(Post).where(posts_table.c.id == post_id))
        return result.scalar_one_or_none()

    async def add(self, post: Post) -> None:
        self._session.add(post)
        await self._session.flush()

    async def delete(self, post: Post) -> None:
        await self._session.delete(post)
        await self._session.flush()
