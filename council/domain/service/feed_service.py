"""Feed domain service."""

from collections.abc import Callable
from datetime import datetime, timezone

import logfire

from council.domain.error import AlreadyLiked, PostNotFound
from council.domain.model.post import Post, PostPayload
from council.domain.repository import PostRepository, SequenceAllocator
from council.domain.value import PostId, Principal
from council.util.locks import KeyedLock

from .base import Service


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FeedService(Service):
    """Domain service for the content feed."""

    def __init__(
        self,
        post_repository: PostRepository,
        sequence: SequenceAllocator,
        locks: KeyedLock,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize feed service.

        Args:
            post_repository: Post repository
            sequence: Allocator assigning post IDs
            locks: Application-wide per-key locks
            clock: Source of post timestamps
        """
        self.post_repository = post_repository
        self.sequence = sequence
        self.locks = locks
        self.clock = clock

    async def count(self) -> int:
        """Count stored posts."""
        return await self.post_repository.count()

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            PostNotFound: If no post is stored under the ID
        """
        post = await self.post_repository.get(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=post_id)
            raise PostNotFound(post_id)
        return post

    async def publish_post(self, payload: PostPayload, creator: Principal) -> Post:
        """Publish a post under the next allocated ID.

        The post is checked against the size bound before the sequence
        advances, so a rejected post does not consume an ID.

        Args:
            payload: Post content
            creator: Identity of the caller

        Returns:
            The stored post

        Raises:
            RecordTooLargeError: If the post exceeds the size bound
        """
        with logfire.span("feed_service.publish_post", creator=str(creator)):
            async with self.locks.hold(("sequence", self.sequence.name)):
                post_id = PostId(await self.sequence.peek())
                post = Post.publish(post_id, payload, creator, at=self.clock())
                self.post_repository.validate(post_id, post)

                await self.sequence.next()
                await self.post_repository.insert(post_id, post)

            logfire.info("Post published", post_id=post_id, creator=str(creator))
            return post

    async def like_post(self, post_id: PostId, caller: Principal) -> Post:
        """Add the caller to a post's likes.

        Raises:
            PostNotFound: If the post does not exist
            AlreadyLiked: If the caller already likes the post
        """
        with logfire.span("feed_service.like_post", post_id=post_id, caller=str(caller)):
            async with self.locks.hold(("post", post_id)):
                post = await self.get_post(post_id)
                if post.is_liked_by(caller):
                    logfire.warn(
                        "Duplicate like attempt", post_id=post_id, caller=str(caller)
                    )
                    raise AlreadyLiked(post_id, str(caller))

                updated = post.liked_by(caller, at=self.clock())
                await self.post_repository.insert(post_id, updated)

            logfire.info("Post liked", post_id=post_id, likes=len(updated.likes))
            return updated

    async def comment_on_post(
        self, post_id: PostId, text: str, caller: Principal
    ) -> Post:
        """Append a comment to a post.

        Raises:
            PostNotFound: If the post does not exist
        """
        with logfire.span(
            "feed_service.comment_on_post", post_id=post_id, caller=str(caller)
        ):
            async with self.locks.hold(("post", post_id)):
                post = await self.get_post(post_id)
                updated = post.with_comment(text, at=self.clock())
                await self.post_repository.insert(post_id, updated)

            logfire.info(
                "Comment added", post_id=post_id, comments=len(updated.comments)
            )
            return updated
