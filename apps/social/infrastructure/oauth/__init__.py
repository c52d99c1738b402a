"""OAuth Provider Implementations."""

from apps.social.infrastructure.oauth.providers import (
    BaseOAuthProvider,
    GitHubOAuthProvider,
    GoogleOAuthProvider,
)
from apps.social.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "BaseOAuthProvider",
    "GitHubOAuthProvider",
    "GoogleOAuthProvider",
    "ProviderRegistry",
]
