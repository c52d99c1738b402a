"""GetPost Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.social.application.posts.dto import PostDTO
from apps.social.application.posts.exceptions import PostNotFoundError

if TYPE_CHECKING:
    from apps.social.application.posts.ports import PostsGateway

logger = logging.getLogger(__name__)


class GetPostQuery:
    def __init__(self, posts_gateway: "PostsGateway") -> None:
        self._posts_gateway = posts_gateway

    async def execute(self, post_id: UUID) -> PostDTO:
        post = await self._posts_gateway.get_by_id(post_id)
        if post is None:
            logger.error("Failed to get post by ID", extra={"post_id": str(post_id)})
            raise PostNotFoundError(post_id)
        return PostDTO.from_entity(post)
