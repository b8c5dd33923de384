"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from council.config import Settings, StorageSettings
from council.domain.repository import (
    PostRepository,
    ProposalRepository,
    SequenceAllocator,
)
from council.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from council.persistence.repository import (
    SqlPostRepository,
    SqlProposalRepository,
    SqlSequenceAllocator,
)
from council.util.di.base import ProviderBase
from council.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using SQLAlchemy."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)

        if settings.database.auto_create_schema:
            await create_schema(engine)
            logfire.info("Database schema ensured")

        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Stores commit each write themselves; anything left pending is
        committed at the end of the request, or rolled back on error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_proposal_repository(
        self, session: AsyncSession, storage: StorageSettings
    ) -> ProposalRepository:
        """Provide Proposal repository."""
        return SqlProposalRepository(session, max_size=storage.proposal_max_size)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(
        self, session: AsyncSession, storage: StorageSettings
    ) -> PostRepository:
        """Provide Post repository."""
        return SqlPostRepository(session, max_size=storage.post_max_size)

    @provide(scope=Scope.REQUEST)
    def get_feed_sequence(
        self, session: AsyncSession, storage: StorageSettings
    ) -> SequenceAllocator:
        """Provide the allocator for post IDs."""
        return SqlSequenceAllocator(session, name=storage.feed_sequence)
