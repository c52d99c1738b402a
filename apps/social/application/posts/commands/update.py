"""UpdatePost Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.social.application.posts.dto import PostDTO, UpdatePostRequest
from apps.social.application.posts.exceptions import PostNotFoundError

if TYPE_CHECKING:
    from apps.social.application.common.ports import TransactionManager
    from apps.social.application.posts.ports import PostsGateway

logger = logging.getLogger(__name__)


class UpdatePostInteractor:
    """게시글 수정 Interactor."""

    def __init__(
        self,
        posts_gateway: "PostsGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._posts_gateway = posts_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, request: UpdatePostRequest) -> PostDTO:
        """
        Raises:
            PostNotFoundError: 게시글이 없음
        """
        post = await self._posts_gateway.get_by_id(request.post_id)
        if post is None:
            logger.error("Failed to update post", extra={"post_id": str(request.post_id)})
            raise PostNotFoundError(request.post_id)

        post.edit(title=request.title, content=request.content)
        await self._transaction_manager.commit()

        logger.info("Post updated", extra={"post_id": str(post.id)})
        return PostDTO.from_entity(post)
