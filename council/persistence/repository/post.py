"""SQL implementation of Post repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from council.domain.model import Post
from council.domain.repository import PostRepository
from council.persistence.repository.record import SqlRecordStore
from council.persistence.tables import posts_table


class SqlPostRepository(SqlRecordStore[Post], PostRepository):
    """SQL implementation of PostRepository."""

    model = Post

    def __init__(self, session: AsyncSession, max_size: int) -> None:
        super().__init__(session, posts_table, max_size)
