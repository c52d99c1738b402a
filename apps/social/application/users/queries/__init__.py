"""Users queries."""

from apps.social.application.users.queries.get_user import GetUserQuery

__all__ = ["GetUserQuery"]
