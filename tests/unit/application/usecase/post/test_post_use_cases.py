"""Unit tests for post use cases."""

import pytest

from council.application.usecase.post import (
    CommentOnPostRequest,
    CommentOnPostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    PublishPostRequest,
    PublishPostUseCase,
)
from council.domain.error import AlreadyLiked
from council.domain.value import PostType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPostUseCases:
    """Tests for the feed use cases."""

    @pytest.mark.asyncio
    async def test_publish_like_comment_flow(self, unit_env):
        publish = await unit_env.get(PublishPostUseCase)
        like = await unit_env.get(LikePostUseCase)
        comment = await unit_env.get(CommentOnPostUseCase)
        get = await unit_env.get(GetPostUseCase)

        published = await publish.execute(
            PublishPostRequest(
                content="Meeting notes",
                image="https://example.com/a.png",
                post_type=PostType.SILVER,
                creator="alice",
            )
        )
        await like.execute(LikePostRequest(post_id=published.post_id, caller="bob"))
        await comment.execute(
            CommentOnPostRequest(post_id=published.post_id, text="Thanks", caller="bob")
        )

        response = await get.execute(GetPostRequest(post_id=published.post_id))
        assert response.post_id == 0
        assert response.creator_id == "alice"
        assert response.post_type == PostType.SILVER
        assert response.likes == ["bob"]
        assert response.comments == ["Thanks"]

    @pytest.mark.asyncio
    async def test_second_like_is_rejected(self, unit_env):
        publish = await unit_env.get(PublishPostUseCase)
        like = await unit_env.get(LikePostUseCase)
        published = await publish.execute(
            PublishPostRequest(content="x", creator="alice")
        )

        await like.execute(LikePostRequest(post_id=published.post_id, caller="bob"))
        with pytest.raises(AlreadyLiked):
            await like.execute(LikePostRequest(post_id=published.post_id, caller="bob"))
