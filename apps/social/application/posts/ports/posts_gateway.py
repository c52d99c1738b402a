"""PostsGateway Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from apps.social.domain.entities.post import Post


class PostsGateway(Protocol):
    """게시글 저장소 인터페이스.

    구현체:
        - SqlaPostsGateway (infrastructure/persistence_postgres/)
    """

    async def list_all(self) -> list[Post]:
        """전체 게시글을 최신순으로 조회합니다."""
        ...

    async def get_by_id(self, post_id: UUID) -> Post | None:
        ...

    async def add(self, post: Post) -> None:
        ...

    async def delete(self, post: Post) -> None:
        ...
