"""Users exceptions."""

from apps.social.application.users.exceptions.user import (
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = ["UserAlreadyExistsError", "UserNotFoundError"]
