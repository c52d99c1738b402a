"""User Exceptions."""

from uuid import UUID

from apps.social.application.common.exceptions.base import ApplicationError


class UserNotFoundError(ApplicationError):
    """사용자를 찾을 수 없음."""

    status_code = 404

    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__("User not found")


class UserAlreadyExistsError(ApplicationError):
    """동일 email 사용자가 이미 존재 (unique 제약 위반)."""

    status_code = 409

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User with email '{email}' already exists")
