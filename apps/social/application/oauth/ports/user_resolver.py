"""UserResolver Port."""

from __future__ import annotations

from typing import Protocol

from apps.social.application.users.dto import UserDTO


class UserResolver(Protocol):
    """email 기준 사용자 조회/생성.

    구현체:
        - FindOrCreateUserInteractor (application/users/commands/)
    """

    async def execute(self, email: str, username: str) -> UserDTO:
        ...
