"""Post repository interface."""

from council.domain.model.post import Post
from council.domain.repository.record import RecordStore


class PostRepository(RecordStore[Post]):
    """Durable store of feed posts keyed by allocated PostId."""
