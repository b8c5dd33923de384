"""Proposal aggregate root.

A proposal is a governance record that identities vote on. It carries one
tally per choice and the set of identities that have already voted.
"""

from pydantic import ConfigDict, Field, model_validator

from council.domain.error import InvalidChoice
from council.domain.model.common import DomainModel
from council.domain.value import Choice, Principal
from council.domain.value.common import ValueObject

MAX_TALLY = 2**32 - 1


class ProposalPayload(ValueObject):
    """Caller-supplied fields for creating or editing a proposal."""

    description: str
    is_active: bool


class Proposal(DomainModel):
    """Proposal aggregate root.

    Business rules:
    - approve + reject + pass always equals the number of voters
    - an identity appears in ``voted`` at most once
    - the owner is fixed at creation; edits never change it
    - votes are only accepted while ``is_active`` is true
    """

    model_config = ConfigDict(populate_by_name=True)

    description: str
    approve: int = Field(default=0, ge=0, le=MAX_TALLY)
    reject: int = Field(default=0, ge=0, le=MAX_TALLY)
    pass_: int = Field(default=0, ge=0, le=MAX_TALLY, alias="pass")
    is_active: bool
    voted: tuple[Principal, ...] = ()
    owner: Principal

    @model_validator(mode="after")
    def validate_tallies(self) -> "Proposal":
        """Validate that tallies and voters agree."""
        if len({voter.root for voter in self.voted}) != len(self.voted):
            raise ValueError("An identity may vote only once")
        if self.approve + self.reject + self.pass_ != len(self.voted):
            raise ValueError("Vote tallies must sum to the number of voters")
        return self

    @classmethod
    def new(cls, payload: ProposalPayload, owner: Principal) -> "Proposal":
        """Build a fresh proposal with zeroed tallies owned by ``owner``."""
        return cls(
            description=payload.description,
            is_active=payload.is_active,
            owner=owner,
        )

    @property
    def total_votes(self) -> int:
        return len(self.voted)

    def is_owned_by(self, caller: Principal) -> bool:
        return self.owner == caller

    def has_voted(self, voter: Principal) -> bool:
        return voter in self.voted

    def edited(self, payload: ProposalPayload) -> "Proposal":
        """Replace description and active flag, keeping tallies, voters and owner."""
        return self._evolve(
            description=payload.description, is_active=payload.is_active
        )

    def closed(self) -> "Proposal":
        """Return this proposal with voting disabled."""
        return self._evolve(is_active=False)

    def with_vote(self, voter: Principal, choice: Choice) -> "Proposal":
        """Record ``voter``'s ballot for ``choice``.

        Eligibility (active, not yet voted) is checked by the caller, which
        knows the proposal id to report.
        """
        if choice == Choice.APPROVE:
            tally = {"approve": self.approve + 1}
        elif choice == Choice.REJECT:
            tally = {"reject": self.reject + 1}
        elif choice == Choice.PASS:
            tally = {"pass_": self.pass_ + 1}
        else:
            raise InvalidChoice(choice)

        return self._evolve(voted=(*self.voted, voter), **tally)
