"""Domain entities."""

from apps.social.domain.entities.post import Post
from apps.social.domain.entities.user import User

__all__ = ["Post", "User"]
