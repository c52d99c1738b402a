"""Users ports."""

from apps.social.application.users.ports.users_gateway import UsersGateway

__all__ = ["UsersGateway"]
