"""Posts DTOs."""

from apps.social.application.posts.dto.post import (
    CreatePostRequest,
    PostDTO,
    UpdatePostRequest,
)

__all__ = ["CreatePostRequest", "PostDTO", "UpdatePostRequest"]
