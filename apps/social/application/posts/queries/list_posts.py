"""ListPosts Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.social.application.posts.dto import PostDTO

if TYPE_CHECKING:
    from apps.social.application.posts.ports import PostsGateway


class ListPostsQuery:
    """전체 게시글 조회 (최신순)."""

    def __init__(self, posts_gateway: "PostsGateway") -> None:
        self._posts_gateway = posts_gateway

    async def execute(self) -> list[PostDTO]:
        posts = await self._posts_gateway.list_all()
        return [PostDTO.from_entity(post) for post in posts]
