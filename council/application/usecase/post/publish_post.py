"""Publish post use case."""

from pydantic import BaseModel

from council.application.usecase.base import BaseUseCase
from council.domain.model.post import PostPayload
from council.domain.service import FeedService
from council.domain.value import PostType, Principal

from .response import PostResponse


class PublishPostRequest(BaseModel):
    """Publish post request."""

    content: str
    image: str | None = None
    video: str | None = None
    post_type: PostType = PostType.FREE
    creator: str  # Principal of the authenticated caller


class PublishPostUseCase(BaseUseCase[PublishPostRequest, PostResponse]):
    """Use case for publishing a post to the feed."""

    def __init__(self, feed_service: FeedService) -> None:
        """Initialize publish post use case.

        Args:
            feed_service: Feed domain service
        """
        self.feed_service = feed_service

    async def execute(self, request: PublishPostRequest) -> PostResponse:
        """Execute publish post flow.

        Returns:
            The stored post with its allocated ID

        Raises:
            RecordTooLargeError: If the post does not fit the record bound
        """
        payload = PostPayload(
            content=request.content,
            image=request.image,
            video=request.video,
            post_type=request.post_type,
        )
        post = await self.feed_service.publish_post(payload, Principal(request.creator))
        return PostResponse.from_post(post)
