"""Posts commands."""

from apps.social.application.posts.commands.create import CreatePostInteractor
from apps.social.application.posts.commands.delete import DeletePostInteractor
from apps.social.application.posts.commands.update import UpdatePostInteractor

__all__ = ["CreatePostInteractor", "DeletePostInteractor", "UpdatePostInteractor"]
