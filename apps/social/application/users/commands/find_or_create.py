"""FindOrCreateUser Command.

OAuth 로그인 후 email 기준으로 사용자를 조회하거나 생성합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.social.application.users.dto import UserDTO
from apps.social.application.users.exceptions import UserAlreadyExistsError
from apps.social.domain.entities.user import User

if TYPE_CHECKING:
    from apps.social.application.common.ports import TransactionManager
    from apps.social.application.users.ports import UsersGateway

logger = logging.getLogger(__name__)


class FindOrCreateUserInteractor:
    """사용자 조회/생성 Interactor.

    Workflow:
        1. email로 기존 사용자 조회 → 있으면 반환
        2. 없으면 생성 후 커밋
        3. 동시 요청으로 unique 위반 시 롤백 후 재조회
    """

    def __init__(
        self,
        users_gateway: "UsersGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._users_gateway = users_gateway
        self._transaction_manager = transaction_manager

    async def execute(self, email: str, username: str) -> UserDTO:
        existing = await self._users_gateway.get_by_email(email)
        if existing is not None:
            logger.info(
                "User found by email",
                extra={"email": email, "username": existing.username},
            )
            return UserDTO.from_entity(existing)

        user = User(email=email, username=username)
        try:
            await self._users_gateway.add(user)
            await self._transaction_manager.commit()
        except UserAlreadyExistsError:
            await self._transaction_manager.rollback()
            existing = await self._users_gateway.get_by_email(email)
            if existing is None:
                raise
            logger.info(
                "User created concurrently, using existing record",
                extra={"email": email, "username": existing.username},
            )
            return UserDTO.from_entity(existing)

        logger.info(
            "User created",
            extra={"user_id": str(user.id), "email": email, "username": username},
        )
        return UserDTO.from_entity(user)
