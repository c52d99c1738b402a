"""Posts Interactor / Query 단위 테스트."""

from uuid import uuid4

import pytest

from apps.social.application.posts.commands import (
    CreatePostInteractor,
    DeletePostInteractor,
    UpdatePostInteractor,
)
from apps.social.application.posts.dto import CreatePostRequest, UpdatePostRequest
from apps.social.application.posts.exceptions import PostNotFoundError
from apps.social.application.posts.queries import GetPostQuery, ListPostsQuery
from apps.social.domain.entities.post import Post


class TestCreatePostInteractor:
    @pytest.mark.asyncio
    async def test_creates_and_commits(self, mock_posts_gateway, mock_transaction_manager) -> None:
        interactor = CreatePostInteractor(mock_posts_gateway, mock_transaction_manager)

        result = await interactor.execute(CreatePostRequest(title="hello", content="world"))

        assert result.title == "hello"
        assert result.content == "world"
        added = mock_posts_gateway.add.await_args.args[0]
        assert added.id == result.id
        mock_transaction_manager.commit.assert_awaited_once()


class TestUpdatePostInteractor:
    @pytest.mark.asyncio
    async def test_updates_fields_and_timestamp(
        self,
        mock_posts_gateway,
        mock_transaction_manager,
        sample_posts: list[Post],
    ) -> None:
        post = sample_posts[1]
        before = post.updated_at
        mock_posts_gateway.get_by_id.return_value = post
        interactor = UpdatePostInteractor(mock_posts_gateway, mock_transaction_manager)

        result = await interactor.execute(
            UpdatePostRequest(post_id=post.id, title="edited", content="body")
        )

        assert result.title == "edited"
        assert result.content == "body"
        assert result.updated_at > before
        assert result.created_at == post.created_at
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_post(self, mock_posts_gateway, mock_transaction_manager) -> None:
        mock_posts_gateway.get_by_id.return_value = None
        interactor = UpdatePostInteractor(mock_posts_gateway, mock_transaction_manager)

        with pytest.raises(PostNotFoundError) as exc_info:
            await interactor.execute(UpdatePostRequest(post_id=uuid4(), title="a", content="b"))

        assert exc_info.value.message == "Post not found"
        mock_transaction_manager.commit.assert_not_awaited()


class TestDeletePostInteractor:
    @pytest.mark.asyncio
    async def test_deletes(
        self,
        mock_posts_gateway,
        mock_transaction_manager,
        sample_posts: list[Post],
    ) -> None:
        post = sample_posts[0]
        mock_posts_gateway.get_by_id.return_value = post

        await DeletePostInteractor(mock_posts_gateway, mock_transaction_manager).execute(post.id)

        mock_posts_gateway.delete.assert_awaited_once_with(post)
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_post(self, mock_posts_gateway, mock_transaction_manager) -> None:
        mock_posts_gateway.get_by_id.return_value = None

        with pytest.raises(PostNotFoundError):
            await DeletePostInteractor(mock_posts_gateway, mock_transaction_manager).execute(uuid4())

        mock_posts_gateway.delete.assert_not_awaited()


class TestPostQueries:
    @pytest.mark.asyncio
    async def test_list_preserves_gateway_order(
        self,
        mock_posts_gateway,
        sample_posts: list[Post],
    ) -> None:
        mock_posts_gateway.list_all.return_value = sample_posts

        result = await ListPostsQuery(mock_posts_gateway).execute()

        assert [p.title for p in result] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_get_missing(self, mock_posts_gateway) -> None:
        mock_posts_gateway.get_by_id.return_value = None

        with pytest.raises(PostNotFoundError):
            await GetPostQuery(mock_posts_gateway).execute(uuid4())
