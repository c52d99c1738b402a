"""Posts exceptions."""

from apps.social.application.posts.exceptions.post import PostNotFoundError

__all__ = ["PostNotFoundError"]
