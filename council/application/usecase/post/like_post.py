"""Like post use case."""

from pydantic import BaseModel

from council.domain.service import FeedService
from council.domain.value import PostId, Principal

from .response import PostResponse


class LikePostRequest(BaseModel):
    """Like post request."""

    post_id: int
    caller: str


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(self, request: LikePostRequest) -> PostResponse:
        """Execute like post flow.

        Raises:
            PostNotFound: If the post does not exist
            AlreadyLiked: If the caller already likes the post
        """
        post = await self.feed_service.like_post(
            PostId(request.post_id), Principal(request.caller)
        )
        return PostResponse.from_post(post)
