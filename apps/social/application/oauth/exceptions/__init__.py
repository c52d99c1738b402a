"""OAuth exceptions."""

from apps.social.application.oauth.exceptions.oauth import (
    CallbackParseError,
    OAuthFlowError,
    OAuthProviderError,
    ProviderNotFoundError,
    StateDecodeError,
    TokenExchangeError,
    UserInfoFetchError,
    UserResolutionError,
)

__all__ = [
    "CallbackParseError",
    "OAuthFlowError",
    "OAuthProviderError",
    "ProviderNotFoundError",
    "StateDecodeError",
    "TokenExchangeError",
    "UserInfoFetchError",
    "UserResolutionError",
]
