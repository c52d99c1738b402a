"""OAuth services."""

from apps.social.application.oauth.services.provider_lookup import lookup_provider
from apps.social.application.oauth.services.state_codec import (
    CallbackTarget,
    build_error_redirect,
    build_start_callback,
    decode_state,
    encode_state,
    parse_callback_state,
)

__all__ = [
    "CallbackTarget",
    "build_error_redirect",
    "build_start_callback",
    "decode_state",
    "encode_state",
    "lookup_provider",
    "parse_callback_state",
]
