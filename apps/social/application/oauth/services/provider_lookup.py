"""Provider lookup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from apps.social.application.oauth.exceptions import ProviderNotFoundError

if TYPE_CHECKING:
    from apps.social.application.oauth.ports import OAuthProvider

logger = logging.getLogger(__name__)


def lookup_provider(providers: Mapping[str, "OAuthProvider"], name: str) -> "OAuthProvider":
    """이름(정확히 일치)으로 프로바이더 조회.

    Raises:
        ProviderNotFoundError: 미등록 프로바이더
    """
    provider = providers.get(name)
    if provider is None:
        logger.error("OAuth2 provider not found", extra={"provider": name})
        raise ProviderNotFoundError(name)
    return provider
