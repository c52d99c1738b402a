"""OAuth DTOs."""

from apps.social.application.oauth.dto.oauth import (
    OAuthCallbackRequest,
    OAuthCallbackResponse,
    OAuthLoginUser,
    OAuthStartRequest,
    OAuthStartResponse,
)

__all__ = [
    "OAuthCallbackRequest",
    "OAuthCallbackResponse",
    "OAuthLoginUser",
    "OAuthStartRequest",
    "OAuthStartResponse",
]
