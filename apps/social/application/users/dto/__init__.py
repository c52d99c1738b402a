"""Users DTOs."""

from apps.social.application.users.dto.user import UserDTO

__all__ = ["UserDTO"]
