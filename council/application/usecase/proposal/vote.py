"""Vote use case."""

from pydantic import BaseModel

from council.application.usecase.base import BaseUseCase
from council.domain.service import ProposalService
from council.domain.value import Choice, Principal, ProposalId


class VoteRequest(BaseModel):
    """Vote request."""

    proposal_id: int
    choice: Choice
    caller: str  # Principal of the voter


class VoteUseCase(BaseUseCase[VoteRequest, None]):
    """Use case for casting a vote on a proposal."""

    def __init__(self, proposal_service: ProposalService) -> None:
        """Initialize vote use case.

        Args:
            proposal_service: Proposal domain service
        """
        self.proposal_service = proposal_service

    async def execute(self, request: VoteRequest) -> None:
        """Execute vote flow.

        Raises:
            NoSuchProposal: If the proposal does not exist
            ProposalIsNotActive: If the proposal is closed
            AlreadyVoted: If the caller already voted
            UpdateError: If the write is not confirmed
        """
        await self.proposal_service.vote(
            ProposalId(request.proposal_id), request.choice, Principal(request.caller)
        )
