"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
Settings와 프로바이더 레지스트리는 create_app()에서 1회 구성되어 app.state에 보관됩니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends, Request

from apps.social.setup.config import Settings
from apps.social.setup.constants import OAUTH_DEBUG_TOKEN_PATH

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from apps.social.application.oauth.commands import (
        OAuthCallbackInteractor,
        OAuthStartInteractor,
    )
    from apps.social.application.posts.commands import (
        CreatePostInteractor,
        DeletePostInteractor,
        UpdatePostInteractor,
    )
    from apps.social.application.posts.queries import GetPostQuery, ListPostsQuery
    from apps.social.application.users.commands import FindOrCreateUserInteractor
    from apps.social.application.users.queries import GetUserQuery
    from apps.social.infrastructure.oauth import ProviderRegistry


# ============================================================
# Application State
# ============================================================


def get_app_settings(request: Request) -> Settings:
    """create_app()에 주입된 Settings."""
    return request.app.state.settings


def get_provider_registry(request: Request) -> "ProviderRegistry":
    """읽기 전용 OAuth 프로바이더 레지스트리."""
    return request.app.state.providers


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.social.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


def get_users_gateway(session: "AsyncSession" = Depends(get_db_session)):
    """UsersGateway 제공자."""
    from apps.social.infrastructure.persistence_postgres.adapters import SqlaUsersGateway

    return SqlaUsersGateway(session)


def get_posts_gateway(session: "AsyncSession" = Depends(get_db_session)):
    """PostsGateway 제공자."""
    from apps.social.infrastructure.persistence_postgres.adapters import SqlaPostsGateway

    return SqlaPostsGateway(session)


def get_transaction_manager(session: "AsyncSession" = Depends(get_db_session)):
    """TransactionManager 제공자."""
    from apps.social.infrastructure.persistence_postgres.adapters import SqlaTransactionManager

    return SqlaTransactionManager(session)


# ============================================================
# Users
# ============================================================


def get_find_or_create_user_interactor(
    users_gateway=Depends(get_users_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> "FindOrCreateUserInteractor":
    from apps.social.application.users.commands import FindOrCreateUserInteractor

    return FindOrCreateUserInteractor(users_gateway, transaction_manager)


def get_user_query(users_gateway=Depends(get_users_gateway)) -> "GetUserQuery":
    from apps.social.application.users.queries import GetUserQuery

    return GetUserQuery(users_gateway)


# ============================================================
# OAuth
# ============================================================


def get_oauth_start_interactor(
    providers: "ProviderRegistry" = Depends(get_provider_registry),
    settings: Settings = Depends(get_app_settings),
) -> "OAuthStartInteractor":
    """OAuthStartInteractor 제공자.

    c 파라미터가 없을 때의 기본 callback은 `{base_url}/api/oauth/debug/token` 입니다.
    """
    from apps.social.application.oauth.commands import OAuthStartInteractor

    return OAuthStartInteractor(
        providers,
        default_callback=f"{settings.base_url}{OAUTH_DEBUG_TOKEN_PATH}",
    )


def get_oauth_callback_interactor(
    providers: "ProviderRegistry" = Depends(get_provider_registry),
    user_resolver: "FindOrCreateUserInteractor" = Depends(get_find_or_create_user_interactor),
) -> "OAuthCallbackInteractor":
    from apps.social.application.oauth.commands import OAuthCallbackInteractor

    return OAuthCallbackInteractor(providers, user_resolver)


# ============================================================
# Posts
# ============================================================


def get_list_posts_query(posts_gateway=Depends(get_posts_gateway)) -> "ListPostsQuery":
    from apps.social.application.posts.queries import ListPostsQuery

    return ListPostsQuery(posts_gateway)


def get_post_query(posts_gateway=Depends(get_posts_gateway)) -> "GetPostQuery":
    from apps.social.application.posts.queries import GetPostQuery

    return GetPostQuery(posts_gateway)


def get_create_post_interactor(
    posts_gateway=Depends(get_posts_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> "CreatePostInteractor":
    from apps.social.application.posts.commands import CreatePostInteractor

    return CreatePostInteractor(posts_gateway, transaction_manager)


def get_update_post_interactor(
    posts_gateway=Depends(get_posts_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> "UpdatePostInteractor":
    from apps.social.application.posts.commands import UpdatePostInteractor

    return UpdatePostInteractor(posts_gateway, transaction_manager)


def get_delete_post_interactor(
    posts_gateway=Depends(get_posts_gateway),
    transaction_manager=Depends(get_transaction_manager),
) -> "DeletePostInteractor":
    from apps.social.application.posts.commands import DeletePostInteractor

    return DeletePostInteractor(posts_gateway, transaction_manager)
