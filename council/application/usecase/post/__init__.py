"""Post use cases."""

from .comment_on_post import CommentOnPostRequest, CommentOnPostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .like_post import LikePostRequest, LikePostUseCase
from .publish_post import PublishPostRequest, PublishPostUseCase
from .response import PostResponse

__all__ = [
    "CommentOnPostRequest",
    "CommentOnPostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "LikePostRequest",
    "LikePostUseCase",
    "PostResponse",
    "PublishPostRequest",
    "PublishPostUseCase",
]
