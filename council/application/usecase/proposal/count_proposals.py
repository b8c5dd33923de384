"""Count proposals use case."""

from pydantic import BaseModel

from council.domain.service import ProposalService


class CountProposalsResponse(BaseModel):
    """Count proposals response."""

    count: int


class CountProposalsUseCase:
    """Use case for counting stored proposals."""

    def __init__(self, proposal_service: ProposalService) -> None:
        self.proposal_service = proposal_service

    async def execute(self) -> CountProposalsResponse:
        return CountProposalsResponse(count=await self.proposal_service.count())
