"""GetUser Query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.social.application.users.dto import UserDTO
from apps.social.application.users.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from apps.social.application.users.ports import UsersGateway

logger = logging.getLogger(__name__)


class GetUserQuery:
    """ID로 사용자를 조회합니다."""

    def __init__(self, users_gateway: "UsersGateway") -> None:
        self._users_gateway = users_gateway

    async def execute(self, user_id: UUID) -> UserDTO:
        """
        Raises:
            UserNotFoundError: 사용자가 없음
        """
        user = await self._users_gateway.get_by_id(user_id)
        if user is None:
            logger.error("Failed to get user by ID", extra={"user_id": str(user_id)})
            raise UserNotFoundError(user_id)
        return UserDTO.from_entity(user)
