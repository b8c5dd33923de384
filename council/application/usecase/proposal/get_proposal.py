"""Get proposal use case."""

from pydantic import BaseModel

from council.domain.service import ProposalService
from council.domain.value import ProposalId

from .response import ProposalResponse


class GetProposalRequest(BaseModel):
    """Get proposal request."""

    proposal_id: int


class GetProposalUseCase:
    """Use case for reading a single proposal."""

    def __init__(self, proposal_service: ProposalService) -> None:
        self.proposal_service = proposal_service

    async def execute(self, request: GetProposalRequest) -> ProposalResponse:
        """Execute get proposal flow.

        Raises:
            NoSuchProposal: If the proposal does not exist
        """
        proposal_id = ProposalId(request.proposal_id)
        proposal = await self.proposal_service.get_proposal(proposal_id)
        return ProposalResponse.from_proposal(proposal_id, proposal)
