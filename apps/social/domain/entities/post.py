"""Post entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Post:
    """게시글 엔티티."""

    title: str
    content: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def edit(self, *, title: str, content: str) -> None:
        """제목/본문을 수정하고 updated_at을 갱신합니다."""
        self.title = title
        self.content = content
        self.updated_at = _utcnow()
