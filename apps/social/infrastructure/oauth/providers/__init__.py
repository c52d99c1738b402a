"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.social.infrastructure.oauth.providers.base import BaseOAuthProvider
from apps.social.infrastructure.oauth.providers.github import GitHubOAuthProvider
from apps.social.infrastructure.oauth.providers.google import GoogleOAuthProvider

__all__ = [
    "BaseOAuthProvider",
    "GitHubOAuthProvider",
    "GoogleOAuthProvider",
]
