"""Get post use case."""

from pydantic import BaseModel

from council.domain.service import FeedService
from council.domain.value import PostId

from .response import PostResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostUseCase:
    """Use case for reading a single post."""

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Raises:
            PostNotFound: If the post does not exist
        """
        post = await self.feed_service.get_post(PostId(request.post_id))
        return PostResponse.from_post(post)
