"""Posts Controller.

게시글 CRUD 엔드포인트입니다.
    GET    /api/posts       목록 (최신순)
    POST   /api/posts       생성 (201)
    GET    /api/post/{id}   단건 조회
    PUT    /api/post/{id}   수정
    DELETE /api/post/{id}   삭제 (204)
"""

from fastapi import APIRouter, Depends, Response

from apps.social.application.posts.commands import (
    CreatePostInteractor,
    DeletePostInteractor,
    UpdatePostInteractor,
)
from apps.social.application.posts.dto import CreatePostRequest, UpdatePostRequest
from apps.social.application.posts.queries import GetPostQuery, ListPostsQuery
from apps.social.presentation.http.schemas import PostRequest, PostResponse
from apps.social.presentation.http.utils import parse_uuid
from apps.social.setup.dependencies import (
    get_create_post_interactor,
    get_delete_post_interactor,
    get_list_posts_query,
    get_post_query,
    get_update_post_interactor,
)

router = APIRouter(tags=["posts"])


@router.get("/posts", response_model=list[PostResponse], summary="게시글 목록")
async def list_posts(
    query: ListPostsQuery = Depends(get_list_posts_query),
) -> list[PostResponse]:
    posts = await query.execute()
    return [PostResponse.model_validate(post) for post in posts]


@router.post("/posts", response_model=PostResponse, status_code=201, summary="게시글 생성")
async def create_post(
    body: PostRequest,
    interactor: CreatePostInteractor = Depends(get_create_post_interactor),
) -> PostResponse:
    post = await interactor.execute(CreatePostRequest(title=body.title, content=body.content))
    return PostResponse.model_validate(post)


@router.get("/post/{post_id}", response_model=PostResponse, summary="게시글 조회")
async def get_post(
    post_id: str,
    query: GetPostQuery = Depends(get_post_query),
) -> PostResponse:
    post = await query.execute(parse_uuid(post_id))
    return PostResponse.model_validate(post)


@router.put("/post/{post_id}", response_model=PostResponse, summary="게시글 수정")
async def update_post(
    post_id: str,
    body: PostRequest,
    interactor: UpdatePostInteractor = Depends(get_update_post_interactor),
) -> PostResponse:
    post = await interactor.execute(
        UpdatePostRequest(post_id=parse_uuid(post_id), title=body.title, content=body.content)
    )
    return PostResponse.model_validate(post)


@router.delete("/post/{post_id}", status_code=204, summary="게시글 삭제")
async def delete_post(
    post_id: str,
    interactor: DeletePostInteractor = Depends(get_delete_post_interactor),
) -> Response:
    await interactor.execute(parse_uuid(post_id))
    return Response(status_code=204)
