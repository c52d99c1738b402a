"""Users HTTP Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserResponse(BaseModel):
    """사용자 정보 응답."""

    id: UUID = Field(..., description="사용자 ID")
    username: str = Field(..., description="사용자명")
    email: str = Field(..., description="이메일")
    created_at: datetime = Field(..., description="생성 시각 (RFC 3339)")
    updated_at: datetime = Field(..., description="수정 시각 (RFC 3339)")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
