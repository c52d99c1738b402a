"""Post DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.social.domain.entities.post import Post


@dataclass(frozen=True, slots=True)
class CreatePostRequest:
    """게시글 생성 요청."""

    title: str
    content: str


@dataclass(frozen=True, slots=True)
class UpdatePostRequest:
    """게시글 수정 요청."""

    post_id: UUID
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class PostDTO:
    """게시글 조회 결과."""

    id: UUID
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostDTO":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
