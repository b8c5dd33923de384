"""Unit tests for FeedService."""

import asyncio
from datetime import datetime, timezone

import pytest

from council.domain.error import AlreadyLiked, PostNotFound
from council.domain.model.post import PostPayload
from council.domain.repository import PostRepository, SequenceAllocator
from council.domain.service import FeedService
from council.domain.value import PostId, PostType
from council.persistence.error import RecordTooLargeError
from council.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemorySequenceAllocator,
)
from council.util.locks import KeyedLock
from tests.conftest import ALICE, BOB
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPublishPost:
    """Tests for publish_post."""

    @pytest.mark.asyncio
    async def test_ids_are_allocated_in_order(self, unit_env):
        service = await unit_env.get(FeedService)

        first = await service.publish_post(PostPayload(content="one"), ALICE)
        second = await service.publish_post(PostPayload(content="two"), BOB)

        assert (first.id, second.id) == (0, 1)
        assert (await service.get_post(PostId(1))).content == "two"
        assert await service.count() == 2

    @pytest.mark.asyncio
    async def test_rejected_post_does_not_consume_an_id(self, unit_env):
        service = await unit_env.get(FeedService)
        sequence = await unit_env.get(SequenceAllocator)

        with pytest.raises(RecordTooLargeError):
            await service.publish_post(PostPayload(content="x" * 2000), ALICE)

        assert await sequence.peek() == 0
        assert await service.count() == 0
        post = await service.publish_post(PostPayload(content="ok"), ALICE)
        assert post.id == 0

    @pytest.mark.asyncio
    async def test_publish_uses_clock_and_payload(self):
        at = datetime(2026, 3, 1, tzinfo=timezone.utc)
        service = FeedService(
            InMemoryPostRepository(max_size=1024),
            InMemorySequenceAllocator("posts"),
            KeyedLock(),
            clock=lambda: at,
        )

        post = await service.publish_post(
            PostPayload(content="gold", post_type=PostType.GOLD), ALICE
        )

        assert post.created_at == at
        assert post.post_type == PostType.GOLD
        assert post.creator_id == ALICE

    @pytest.mark.asyncio
    async def test_concurrent_publishes_get_distinct_ids(self, unit_env):
        service = await unit_env.get(FeedService)

        posts = await asyncio.gather(
            *(
                service.publish_post(PostPayload(content=str(i)), ALICE)
                for i in range(10)
            )
        )

        assert sorted(post.id for post in posts) == list(range(10))


class TestEngagement:
    """Tests for likes and comments."""

    @pytest.mark.asyncio
    async def test_like_once(self, unit_env):
        service = await unit_env.get(FeedService)
        post = await service.publish_post(PostPayload(content="hi"), ALICE)

        liked = await service.like_post(PostId(post.id), BOB)
        assert liked.likes == (BOB,)

        with pytest.raises(AlreadyLiked):
            await service.like_post(PostId(post.id), BOB)
        assert (await service.get_post(PostId(post.id))).likes == (BOB,)

    @pytest.mark.asyncio
    async def test_comments_append_in_order(self, unit_env):
        service = await unit_env.get(FeedService)
        post = await service.publish_post(PostPayload(content="hi"), ALICE)

        await service.comment_on_post(PostId(post.id), "first", BOB)
        updated = await service.comment_on_post(PostId(post.id), "second", ALICE)

        assert updated.comments == ("first", "second")
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_comment_that_overflows_post_is_rejected(self, unit_env):
        service = await unit_env.get(FeedService)
        repo = await unit_env.get(PostRepository)
        post = await service.publish_post(PostPayload(content="hi"), ALICE)
        before = repo.raw(post.id)

        with pytest.raises(RecordTooLargeError):
            await service.comment_on_post(PostId(post.id), "y" * 1100, BOB)

        assert repo.raw(post.id) == before

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        service = await unit_env.get(FeedService)

        with pytest.raises(PostNotFound):
            await service.get_post(PostId(9))
        with pytest.raises(PostNotFound):
            await service.like_post(PostId(9), BOB)
        with pytest.raises(PostNotFound):
            await service.comment_on_post(PostId(9), "hello", BOB)
