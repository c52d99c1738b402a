"""DeletePost Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.social.application.posts.exceptions import PostNotFoundError

if TYPE_CHECKING:
    from apps.social.application.common.ports import TransactionManager
    from apps.social.application.posts.ports import PostsGateway

logger = logging.getLogger(__name__)


class DeletePostInteractor:
    """게시글 삭제 Interactor."""

    def __init__(
        self,
        posts_gateway: "PostsGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._posts_gateway = posts_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, post_id: UUID) -> None:
        post = await self._posts_gateway.get_by_id(post_id)
        if post is None:
            logger.error("Failed to delete post", extra={"post_id": str(post_id)})
            raise PostNotFoundError(post_id)

        await self._posts_gateway.delete(post)
        await self._transaction_manager.commit()
        logger.info("Post deleted", extra={"post_id": str(post_id)})
