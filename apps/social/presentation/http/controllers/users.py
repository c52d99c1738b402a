"""Users Controller."""

from fastapi import APIRouter, Depends

from apps.social.application.users.queries import GetUserQuery
from apps.social.presentation.http.schemas import UserResponse
from apps.social.presentation.http.utils import parse_uuid
from apps.social.setup.dependencies import get_user_query

router = APIRouter(tags=["users"])


@router.get("/users/{user_id}", response_model=UserResponse, summary="사용자 조회")
async def get_user(
    user_id: str,
    query: GetUserQuery = Depends(get_user_query),
) -> UserResponse:
    user = await query.execute(parse_uuid(user_id, "Invalid user ID format"))
    return UserResponse.model_validate(user)
