"""OAuth commands."""

from apps.social.application.oauth.commands.callback import OAuthCallbackInteractor
from apps.social.application.oauth.commands.start import OAuthStartInteractor

__all__ = ["OAuthCallbackInteractor", "OAuthStartInteractor"]
