"""Post aggregate root.

Posts are the entries of the content feed. Their ids are assigned by the
feed's sequence allocator; there is no voting on posts.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from council.domain.model.common import DomainModel
from council.domain.value import MAX_RECORD_KEY, PostId, PostType, Principal
from council.domain.value.common import ValueObject


class PostPayload(ValueObject):
    """Caller-supplied fields for publishing a post."""

    content: str
    image: Optional[str] = None
    video: Optional[str] = None
    post_type: PostType = PostType.FREE


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId = Field(ge=0, le=MAX_RECORD_KEY)
    content: str
    image: Optional[str] = None
    video: Optional[str] = None
    post_type: PostType
    creator_id: Principal
    likes: tuple[Principal, ...] = ()
    comments: tuple[str, ...] = ()
    created_at: datetime
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_likes(self) -> "Post":
        """Validate that nobody likes a post twice."""
        if len({liker.root for liker in self.likes}) != len(self.likes):
            raise ValueError("An identity may like a post only once")
        return self

    @classmethod
    def publish(
        cls, post_id: PostId, payload: PostPayload, creator: Principal, at: datetime
    ) -> "Post":
        return cls(
            id=post_id,
            content=payload.content,
            image=payload.image,
            video=payload.video,
            post_type=payload.post_type,
            creator_id=creator,
            created_at=at,
        )

    def is_liked_by(self, caller: Principal) -> bool:
        return caller in self.likes

    def liked_by(self, caller: Principal, at: datetime) -> "Post":
        return self._evolve(likes=(*self.likes, caller), updated_at=at)

    def with_comment(self, text: str, at: datetime) -> "Post":
        return self._evolve(comments=(*self.comments, text), updated_at=at)
