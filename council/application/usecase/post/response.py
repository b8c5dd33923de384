"""Post response shared by feed use cases."""

from datetime import datetime

from pydantic import BaseModel

from council.domain.model.post import Post
from council.domain.value import PostType


class PostResponse(BaseModel):
    """A post as returned to callers."""

    post_id: int
    content: str
    image: str | None
    video: str | None
    post_type: PostType
    creator_id: str
    likes: list[str]
    comments: list[str]
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            post_id=post.id,
            content=post.content,
            image=post.image,
            video=post.video,
            post_type=post.post_type,
            creator_id=str(post.creator_id),
            likes=[str(liker) for liker in post.likes],
            comments=list(post.comments),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
