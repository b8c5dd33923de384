"""Feed post routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Path, status
from pydantic import BaseModel, Field

from council.application.usecase.post import (
    CommentOnPostRequest,
    CommentOnPostUseCase,
    GetPostRequest,
    GetPostUseCase,
    LikePostRequest,
    LikePostUseCase,
    PostResponse,
    PublishPostRequest,
    PublishPostUseCase,
)
from council.domain.service import JWTService
from council.domain.value import MAX_RECORD_KEY, PostType
from council.interface.api.identity import require_caller

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)

PostIdPath = Annotated[
    int, Path(ge=0, le=MAX_RECORD_KEY, description="Post ID (u64)")
]


class PublishPostAPIRequest(BaseModel):
    """API request for publishing a post."""

    content: str
    image: str | None = None
    video: str | None = None
    post_type: PostType = PostType.FREE


class CommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    text: str = Field(min_length=1)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def publish_post(
    request: PublishPostAPIRequest,
    publish_use_case: FromDishka[PublishPostUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PostResponse:
    """Publish a new post to the feed.

    Requires authentication. The post ID is allocated by the feed counter.

    Args:
        request: Post content
        publish_use_case: Publish post use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        The stored post

    Raises:
        RecordTooLargeError: Rendered as 413, no ID is consumed
    """
    caller = require_caller(jwt_service, authorization, auth_token, "publish posts")
    return await publish_use_case.execute(
        PublishPostRequest(
            content=request.content,
            image=request.image,
            video=request.video,
            post_type=request.post_type,
            creator=caller.root,
        )
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    get_use_case: FromDishka[GetPostUseCase],
    post_id: PostIdPath,
) -> PostResponse:
    """Get a post by ID."""
    return await get_use_case.execute(GetPostRequest(post_id=post_id))


@router.post("/{post_id}/likes", response_model=PostResponse)
async def like_post(
    like_use_case: FromDishka[LikePostUseCase],
    jwt_service: FromDishka[JWTService],
    post_id: PostIdPath,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PostResponse:
    """Like a post. Each identity likes a post at most once."""
    caller = require_caller(jwt_service, authorization, auth_token, "like posts")
    return await like_use_case.execute(
        LikePostRequest(post_id=post_id, caller=caller.root)
    )


@router.post("/{post_id}/comments", response_model=PostResponse)
async def comment_on_post(
    request: CommentAPIRequest,
    comment_use_case: FromDishka[CommentOnPostUseCase],
    jwt_service: FromDishka[JWTService],
    post_id: PostIdPath,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> PostResponse:
    """Append a comment to a post."""
    caller = require_caller(jwt_service, authorization, auth_token, "comment")
    return await comment_use_case.execute(
        CommentOnPostRequest(post_id=post_id, text=request.text, caller=caller.root)
    )
