"""In-memory post repository for testing."""

from council.domain.model import Post
from council.domain.repository import PostRepository
from council.persistence.repository.inmemory.record import InMemoryRecordStore


class InMemoryPostRepository(InMemoryRecordStore[Post], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    model = Post
