"""UsersGateway Port."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from apps.social.domain.entities.user import User


class UsersGateway(Protocol):
    """사용자 저장소 인터페이스.

    구현체:
        - SqlaUsersGateway (infrastructure/persistence_postgres/)
    """

    async def get_by_id(self, user_id: UUID) -> User | None:
        """ID로 사용자를 조회합니다."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """email로 사용자를 조회합니다."""
        ...

    async def add(self, user: User) -> None:
        """사용자를 추가하고 flush 합니다.

        Raises:
            UserAlreadyExistsError: email unique 제약 위반
        """
        ...
