"""Posts ports."""

from apps.social.application.posts.ports.posts_gateway import PostsGateway

__all__ = ["PostsGateway"]
