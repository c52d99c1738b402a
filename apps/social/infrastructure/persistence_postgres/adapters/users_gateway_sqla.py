"""SQLAlchemy Users Gateway.

UsersGateway 포트의 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from apps.social.application.users.exceptions import UserAlreadyExistsError
from apps.social.domain.entities.user import User
from apps.social.infrastructure.persistence_postgres.mappings.users import users_table

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlaUsersGateway:
    """SQLAlchemy 기반 Users Gateway."""

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def get_by_id(self, user_id: UUID) -> User | None:
        result = await self._session.execute(select(User).where(users_table.c.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        result = await self._session.execute(select(User).where(users_table.c.email == email))
        return result.scalar_one_or_none()

    async def add(self, user: User) -> None:
        """사용자 추가 후 flush (unique 위반 → UserAlreadyExistsError)."""
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise UserAlreadyExistsError(user.email) from e
