"""List proposals use case."""

from pydantic import BaseModel, Field

from council.domain.service import ProposalService

from .response import ProposalResponse


class ListProposalsRequest(BaseModel):
    """List proposals request."""

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=30, ge=1, le=100)


class ListProposalsResponse(BaseModel):
    """List proposals response."""

    proposals: list[ProposalResponse]
    total: int
    offset: int
    limit: int


class ListProposalsUseCase:
    """Use case for paging through proposals in ID order."""

    def __init__(self, proposal_service: ProposalService) -> None:
        self.proposal_service = proposal_service

    async def execute(self, request: ListProposalsRequest) -> ListProposalsResponse:
        items = await self.proposal_service.list_proposals(
            offset=request.offset, limit=request.limit
        )
        total = await self.proposal_service.count()

        return ListProposalsResponse(
            proposals=[
                ProposalResponse.from_proposal(proposal_id, proposal)
                for proposal_id, proposal in items
            ],
            total=total,
            offset=request.offset,
            limit=request.limit,
        )
