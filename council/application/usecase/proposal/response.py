"""Proposal response shared by proposal use cases."""

from pydantic import BaseModel, ConfigDict, Field

from council.domain.model.proposal import Proposal


class ProposalResponse(BaseModel):
    """A proposal as returned to callers."""

    model_config = ConfigDict(populate_by_name=True)

    proposal_id: int
    description: str
    approve: int
    reject: int
    pass_: int = Field(alias="pass")
    is_active: bool
    voted: list[str]
    owner: str

    @classmethod
    def from_proposal(cls, proposal_id: int, proposal: Proposal) -> "ProposalResponse":
        return cls(
            proposal_id=proposal_id,
            description=proposal.description,
            approve=proposal.approve,
            reject=proposal.reject,
            pass_=proposal.pass_,
            is_active=proposal.is_active,
            voted=[str(voter) for voter in proposal.voted],
            owner=str(proposal.owner),
        )
