"""Application layer DI providers."""

from dishka import Scope, provide

from council.application.usecase.post import (
    CommentOnPostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    PublishPostUseCase,
)
from council.application.usecase.proposal import (
    CloseProposalUseCase,
    CountProposalsUseCase,
    CreateProposalUseCase,
    EditProposalUseCase,
    GetProposalUseCase,
    ListProposalsUseCase,
    VoteUseCase,
)
from council.domain.service import FeedService, ProposalService
from council.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Proposal use cases
    @provide(scope=Scope.REQUEST)
    def get_count_proposals_use_case(
        self, proposal_service: ProposalService
    ) -> CountProposalsUseCase:
        """Provide count proposals use case."""
        return CountProposalsUseCase(proposal_service=proposal_service)

    @provide(scope=Scope.REQUEST)
    def get_create_proposal_use_case(
        self, proposal_service: ProposalService
    ) -> CreateProposalUseCase:
        """Provide create proposal use case."""
        return CreateProposalUseCase(proposal_service=proposal_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_proposal_use_case(
        self, proposal_service: ProposalService
    ) -> EditProposalUseCase:
        """Provide edit proposal use case."""
        return EditProposalUseCase(proposal_service=proposal_service)

    @provide(scope=Scope.REQUEST)
    def get_close_proposal_use_case(
        self, proposal_service: ProposalService
    ) -> CloseProposalUseCase:
        """Provide close proposal use case."""
        return CloseProposalUseCase(proposal_service=proposal_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(self, proposal_service: ProposalService) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(proposal_service=proposal_service)

    @provide(scope=Scope.REQUEST)
    def get_get_proposal_use_case(
        self, proposal_service: ProposalService
    ) -> GetProposalUseCase:
        """Provide get proposal use case."""
        return GetProposalUseCase(proposal_service=proposal_service)

    @provide(scope=Scope.REQUEST)
    def get_list_proposals_use_case(
        self, proposal_service: ProposalService
    ) -> ListProposalsUseCase:
        """Provide list proposals use case."""
        return ListProposalsUseCase(proposal_service=proposal_service)

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_publish_post_use_case(
        self, feed_service: FeedService
    ) -> PublishPostUseCase:
        """Provide publish post use case."""
        return PublishPostUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, feed_service: FeedService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_like_post_use_case(self, feed_service: FeedService) -> LikePostUseCase:
        """Provide like post use case."""
        return LikePostUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_on_post_use_case(
        self, feed_service: FeedService
    ) -> CommentOnPostUseCase:
        """Provide comment on post use case."""
        return CommentOnPostUseCase(feed_service=feed_service)
