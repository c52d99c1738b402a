"""Posts HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostRequest(BaseModel):
    """게시글 생성/수정 요청. title, content 모두 필수."""

    title: str = Field(..., min_length=1, description="제목")
    content: str = Field(..., min_length=1, description="본문")


class PostResponse(BaseModel):
    """게시글 응답."""

    id: UUID = Field(..., description="게시글 ID")
    title: str = Field(..., description="제목")
    content: str = Field(..., description="본문")
    created_at: datetime = Field(..., description="생성 시각 (RFC 3339)")
    updated_at: datetime = Field(..., description="수정 시각 (RFC 3339)")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
