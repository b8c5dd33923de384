"""Comment on post use case."""

from pydantic import BaseModel, Field

from council.domain.service import FeedService
from council.domain.value import PostId, Principal

from .response import PostResponse


class CommentOnPostRequest(BaseModel):
    """Comment on post request."""

    post_id: int
    text: str = Field(min_length=1)
    caller: str


class CommentOnPostUseCase:
    """Use case for appending a comment to a post."""

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(self, request: CommentOnPostRequest) -> PostResponse:
        post = await self.feed_service.comment_on_post(
            PostId(request.post_id), request.text, Principal(request.caller)
        )
        return PostResponse.from_post(post)
