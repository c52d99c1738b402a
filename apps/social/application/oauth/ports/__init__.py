"""OAuth ports."""

from apps.social.application.oauth.ports.provider import (
    AuthorizationConfig,
    OAuthProvider,
    OAuthToken,
    OAuthUserInfo,
)
from apps.social.application.oauth.ports.user_resolver import UserResolver

__all__ = [
    "AuthorizationConfig",
    "OAuthProvider",
    "OAuthToken",
    "OAuthUserInfo",
    "UserResolver",
]
