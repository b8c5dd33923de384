"""Domain layer DI providers."""

from dishka import Scope, provide

from council.config import AuthSettings, GovernanceSettings
from council.domain.repository import (
    PostRepository,
    ProposalRepository,
    SequenceAllocator,
)
from council.domain.service import FeedService, JWTService, ProposalService
from council.util.di.base import ProviderBase
from council.util.locks import KeyedLock


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_proposal_service(
        self,
        proposal_repository: ProposalRepository,
        locks: KeyedLock,
        settings: GovernanceSettings,
    ) -> ProposalService:
        """Provide proposal domain service."""
        return ProposalService(
            proposal_repository=proposal_repository, locks=locks, settings=settings
        )

    @provide
    def get_feed_service(
        self,
        post_repository: PostRepository,
        sequence: SequenceAllocator,
        locks: KeyedLock,
    ) -> FeedService:
        """Provide feed domain service."""
        return FeedService(
            post_repository=post_repository, sequence=sequence, locks=locks
        )
