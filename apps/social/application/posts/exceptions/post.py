"""Post Exceptions."""

from uuid import UUID

from apps.social.application.common.exceptions.base import ApplicationError


class PostNotFoundError(ApplicationError):
    """게시글을 찾을 수 없음."""

    status_code = 404

    def __init__(self, post_id: UUID) -> None:
        self.post_id = post_id
        super().__init__("Post not found")
