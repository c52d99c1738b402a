"""Users commands."""

from apps.social.application.users.commands.find_or_create import FindOrCreateUserInteractor

__all__ = ["FindOrCreateUserInteractor"]
