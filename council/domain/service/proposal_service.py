"""Proposal domain service.

Implements the proposal voting state machine. Every mutation runs its
read-validate-write sequence under the proposal's lock, and every rule is
checked before the new record is computed, so a rejected call leaves the
stored proposal untouched.
"""

import logfire

from council.config import GovernanceSettings
from council.domain.error import (
    AccessRejected,
    AlreadyVoted,
    NoSuchProposal,
    ProposalIsNotActive,
    UpdateError,
)
from council.domain.model.proposal import Proposal, ProposalPayload
from council.domain.repository import ProposalRepository
from council.domain.value import Choice, Principal, ProposalId
from council.util.locks import KeyedLock

from .base import Service


class ProposalService(Service):
    """Domain service for proposal operations."""

    def __init__(
        self,
        proposal_repository: ProposalRepository,
        locks: KeyedLock,
        settings: GovernanceSettings,
    ) -> None:
        """Initialize proposal service.

        Args:
            proposal_repository: Proposal repository
            locks: Application-wide per-key locks
            settings: Governance settings
        """
        self.proposal_repository = proposal_repository
        self.locks = locks
        self.settings = settings

    def _lock(self, proposal_id: ProposalId):
        return self.locks.hold(("proposal", proposal_id))

    async def count(self) -> int:
        """Count stored proposals."""
        return await self.proposal_repository.count()

    async def get_proposal(self, proposal_id: ProposalId) -> Proposal:
        """Get a proposal by ID.

        Raises:
            NoSuchProposal: If no proposal is stored under the ID
        """
        proposal = await self.proposal_repository.get(proposal_id)
        if proposal is None:
            raise NoSuchProposal(proposal_id)
        return proposal

    async def list_proposals(
        self, offset: int = 0, limit: int = 30
    ) -> list[tuple[ProposalId, Proposal]]:
        """List proposals in ID order."""
        items = await self.proposal_repository.items(offset=offset, limit=limit)
        return [(ProposalId(key), proposal) for key, proposal in items]

    async def create_proposal(
        self, proposal_id: ProposalId, payload: ProposalPayload, caller: Principal
    ) -> Proposal:
        """Create a proposal owned by the caller.

        Any record already stored under the ID is replaced, unless
        ``guard_create_overwrite`` is enabled and it belongs to someone else.

        Args:
            proposal_id: Caller-chosen proposal ID
            payload: Description and initial active flag
            caller: Identity of the caller, who becomes the owner

        Returns:
            The created proposal

        Raises:
            AccessRejected: If overwrite guarding is on and the ID is taken
        """
        with logfire.span(
            "proposal_service.create_proposal",
            proposal_id=proposal_id,
            caller=str(caller),
        ):
            async with self._lock(proposal_id):
                if self.settings.guard_create_overwrite:
                    existing = await self.proposal_repository.get(proposal_id)
                    if existing is not None and not existing.is_owned_by(caller):
                        logfire.warn(
                            "Create over foreign proposal rejected",
                            proposal_id=proposal_id,
                            owner=str(existing.owner),
                            caller=str(caller),
                        )
                        raise AccessRejected("proposal", proposal_id, str(caller))

                proposal = Proposal.new(payload, owner=caller)
                previous = await self.proposal_repository.insert(proposal_id, proposal)

            if previous is not None:
                logfire.warn(
                    "Proposal overwritten by create",
                    proposal_id=proposal_id,
                    previous_owner=str(previous.owner),
                    owner=str(caller),
                )
            logfire.info(
                "Proposal created", proposal_id=proposal_id, owner=str(caller)
            )
            return proposal

    async def _load_owned(
        self, proposal_id: ProposalId, caller: Principal
    ) -> Proposal:
        proposal = await self.proposal_repository.get(proposal_id)
        if proposal is None:
            logfire.warn("Proposal not found", proposal_id=proposal_id)
            raise NoSuchProposal(proposal_id)

        if not proposal.is_owned_by(caller):
            logfire.warn(
                "Non-owner mutation rejected",
                proposal_id=proposal_id,
                owner=str(proposal.owner),
                caller=str(caller),
            )
            raise AccessRejected("proposal", proposal_id, str(caller))

        return proposal

    async def _write_back(self, proposal_id: ProposalId, proposal: Proposal) -> None:
        previous = await self.proposal_repository.insert(proposal_id, proposal)
        if previous is None:
            logfire.error("Proposal update not confirmed", proposal_id=proposal_id)
            raise UpdateError("proposal", proposal_id)

    async def edit_proposal(
        self, proposal_id: ProposalId, payload: ProposalPayload, caller: Principal
    ) -> None:
        """Replace a proposal's description and active flag.

        Tallies, voters and owner are preserved. A closed proposal can be
        reopened by editing it with ``is_active`` set.

        Raises:
            NoSuchProposal: If the proposal does not exist
            AccessRejected: If the caller is not the owner
            UpdateError: If the store does not confirm the write
        """
        with logfire.span(
            "proposal_service.edit_proposal",
            proposal_id=proposal_id,
            caller=str(caller),
        ):
            async with self._lock(proposal_id):
                proposal = await self._load_owned(proposal_id, caller)
                await self._write_back(proposal_id, proposal.edited(payload))

            logfire.info(
                "Proposal edited",
                proposal_id=proposal_id,
                is_active=payload.is_active,
            )

    async def close_proposal(self, proposal_id: ProposalId, caller: Principal) -> None:
        """Stop accepting votes on a proposal. Closing twice is harmless.

        Raises:
            NoSuchProposal: If the proposal does not exist
            AccessRejected: If the caller is not the owner
            UpdateError: If the store does not confirm the write
        """
        with logfire.span(
            "proposal_service.close_proposal",
            proposal_id=proposal_id,
            caller=str(caller),
        ):
            async with self._lock(proposal_id):
                proposal = await self._load_owned(proposal_id, caller)
                await self._write_back(proposal_id, proposal.closed())

            logfire.info("Proposal closed", proposal_id=proposal_id)

    async def vote(
        self, proposal_id: ProposalId, choice: Choice, caller: Principal
    ) -> None:
        """Cast the caller's vote on a proposal.

        Args:
            proposal_id: Proposal ID
            choice: Tally to increment
            caller: Identity of the voter

        Raises:
            NoSuchProposal: If the proposal does not exist
            ProposalIsNotActive: If the proposal is closed
            AlreadyVoted: If the caller has voted on this proposal before
            UpdateError: If the store does not confirm the write
        """
        with logfire.span(
            "proposal_service.vote",
            proposal_id=proposal_id,
            choice=choice.value,
            caller=str(caller),
        ):
            async with self._lock(proposal_id):
                proposal = await self.proposal_repository.get(proposal_id)
                if proposal is None:
                    logfire.warn("Vote on non-existent proposal", proposal_id=proposal_id)
                    raise NoSuchProposal(proposal_id)

                # Closed is reported ahead of a repeated vote
                if not proposal.is_active:
                    logfire.warn("Vote on closed proposal", proposal_id=proposal_id)
                    raise ProposalIsNotActive(proposal_id)

                if proposal.has_voted(caller):
                    logfire.warn(
                        "Duplicate vote attempt",
                        proposal_id=proposal_id,
                        caller=str(caller),
                    )
                    raise AlreadyVoted(proposal_id, str(caller))

                await self._write_back(proposal_id, proposal.with_vote(caller, choice))

            logfire.info(
                "Vote recorded",
                proposal_id=proposal_id,
                choice=choice.value,
                caller=str(caller),
            )
