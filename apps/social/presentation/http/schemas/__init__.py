"""HTTP Schemas."""

from apps.social.presentation.http.schemas.general import HealthResponse
from apps.social.presentation.http.schemas.oauth import LoginUserResponse
from apps.social.presentation.http.schemas.posts import PostRequest, PostResponse
from apps.social.presentation.http.schemas.users import UserResponse

__all__ = [
    "HealthResponse",
    "LoginUserResponse",
    "PostRequest",
    "PostResponse",
    "UserResponse",
]
