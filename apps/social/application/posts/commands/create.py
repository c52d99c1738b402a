"""CreatePost Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.social.application.posts.dto import CreatePostRequest, PostDTO
from apps.social.domain.entities.post import Post

if TYPE_CHECKING:
    from apps.social.application.common.ports import TransactionManager
    from apps.social.application.posts.ports import PostsGateway

logger = logging.getLogger(__name__)


class CreatePostInteractor:
    """게시글 생성 Interactor."""

    def __init__(
        self,
        posts_gateway: "PostsGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._posts_gateway = posts_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: CreatePostRequest) -> PostDTO:
        post = Post(title=request.title, content=request.content)
        await self._posts_gateway.add(post)
        await self._transaction_manager.commit()

        logger.info("Post created", extra={"post_id": str(post.id)})
        return PostDTO.from_entity(post)
