"""Posts queries."""

from apps.social.application.posts.queries.get_post import GetPostQuery
from apps.social.application.posts.queries.list_posts import ListPostsQuery

__all__ = ["GetPostQuery", "ListPostsQuery"]
