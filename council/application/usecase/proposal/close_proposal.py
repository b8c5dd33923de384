"""Close proposal use case."""

from pydantic import BaseModel

from council.application.usecase.base import BaseUseCase
from council.domain.service import ProposalService
from council.domain.value import Principal, ProposalId


class CloseProposalRequest(BaseModel):
    """Close proposal request."""

    proposal_id: int
    caller: str  # Must be the owner


class CloseProposalUseCase(BaseUseCase[CloseProposalRequest, None]):
    """Use case for closing a proposal to further votes."""

    def __init__(self, proposal_service: ProposalService) -> None:
        self.proposal_service = proposal_service

    async def execute(self, request: CloseProposalRequest) -> None:
        await self.proposal_service.close_proposal(
            ProposalId(request.proposal_id), Principal(request.caller)
        )
