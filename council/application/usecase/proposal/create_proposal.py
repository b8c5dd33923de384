"""Create proposal use case."""

from pydantic import BaseModel

from council.application.usecase.base import BaseUseCase
from council.domain.model.proposal import ProposalPayload
from council.domain.service import ProposalService
from council.domain.value import Principal, ProposalId

from .response import ProposalResponse


class CreateProposalRequest(BaseModel):
    """Create proposal request."""

    proposal_id: int
    description: str
    is_active: bool
    caller: str  # Principal of the authenticated caller


class CreateProposalUseCase(BaseUseCase[CreateProposalRequest, ProposalResponse]):
    """Use case for creating (or overwriting) a proposal."""

    def __init__(self, proposal_service: ProposalService) -> None:
        """Initialize create proposal use case.

        Args:
            proposal_service: Proposal domain service
        """
        self.proposal_service = proposal_service

    async def execute(self, request: CreateProposalRequest) -> ProposalResponse:
        """Execute create proposal flow.

        Args:
            request: Create proposal request

        Returns:
            The created proposal

        Raises:
            AccessRejected: If overwrite guarding is on and the ID is taken
            RecordTooLargeError: If the description does not fit the record bound
        """
        proposal_id = ProposalId(request.proposal_id)
        payload = ProposalPayload(
            description=request.description, is_active=request.is_active
        )

        proposal = await self.proposal_service.create_proposal(
            proposal_id, payload, Principal(request.caller)
        )

        return ProposalResponse.from_proposal(proposal_id, proposal)
