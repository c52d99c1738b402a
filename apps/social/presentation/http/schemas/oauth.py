"""OAuth HTTP Schemas."""

from uuid import UUID

from pydantic import BaseModel, Field


class LoginUserResponse(BaseModel):
    """OAuth 로그인 결과."""

    id: UUID = Field(..., description="사용자 ID")
    username: str = Field(..., description="사용자명")
    email: str = Field(..., description="이메일")

    model_config = {"from_attributes": True}
