"""Edit proposal use case."""

from pydantic import BaseModel

from council.application.usecase.base import BaseUseCase
from council.domain.model.proposal import ProposalPayload
from council.domain.service import ProposalService
from council.domain.value import Principal, ProposalId


class EditProposalRequest(BaseModel):
    """Edit proposal request."""

    proposal_id: int
    description: str
    is_active: bool
    caller: str  # Must be the owner


class EditProposalUseCase(BaseUseCase[EditProposalRequest, None]):
    """Use case for editing a proposal's description and active flag."""

    def __init__(self, proposal_service: ProposalService) -> None:
        """Initialize edit proposal use case.

        Args:
            proposal_service: Proposal domain service
        """
        self.proposal_service = proposal_service

    async def execute(self, request: EditProposalRequest) -> None:
        """Execute edit proposal flow.

        Raises:
            NoSuchProposal: If the proposal does not exist
            AccessRejected: If the caller is not the owner
            UpdateError: If the write is not confirmed
        """
        payload = ProposalPayload(
            description=request.description, is_active=request.is_active
        )
        await self.proposal_service.edit_proposal(
            ProposalId(request.proposal_id), payload, Principal(request.caller)
        )
