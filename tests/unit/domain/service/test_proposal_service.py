"""Unit tests for ProposalService."""

import asyncio

import pytest

from council.config import GovernanceSettings
from council.domain.error import (
    AccessRejected,
    AlreadyVoted,
    NoSuchProposal,
    ProposalIsNotActive,
    UpdateError,
)
from council.domain.model.proposal import Proposal
from council.domain.repository import ProposalRepository
from council.domain.service import ProposalService
from council.domain.value import Choice, Principal, ProposalId
from council.persistence.error import RecordTooLargeError
from council.persistence.repository.inmemory import InMemoryProposalRepository
from council.util.locks import KeyedLock
from tests.conftest import ALICE, BOB, CAROL, make_payload
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

DAVE = Principal("dave")
PID = ProposalId(1)


class TestProposalLifecycle:
    """The create, vote, close walkthrough."""

    @pytest.mark.asyncio
    async def test_walkthrough(self, unit_env):
        """Create, vote, reject duplicates and strangers, close, refuse late votes."""
        service = await unit_env.get(ProposalService)

        # Create by A
        created = await service.create_proposal(PID, make_payload("D", True), ALICE)
        assert (created.approve, created.reject, created.pass_) == (0, 0, 0)
        assert created.voted == ()
        assert created.owner == ALICE
        assert created.is_active is True

        # Vote by B
        await service.vote(PID, Choice.APPROVE, BOB)
        proposal = await service.get_proposal(PID)
        assert proposal.approve == 1
        assert proposal.voted == (BOB,)

        # B again
        with pytest.raises(AlreadyVoted):
            await service.vote(PID, Choice.APPROVE, BOB)
        proposal = await service.get_proposal(PID)
        assert proposal.approve == 1
        assert proposal.voted == (BOB,)

        # Close by C
        with pytest.raises(AccessRejected):
            await service.close_proposal(PID, CAROL)
        assert (await service.get_proposal(PID)).is_active is True

        # Close by A
        await service.close_proposal(PID, ALICE)
        assert (await service.get_proposal(PID)).is_active is False

        # Vote by D on the closed proposal
        with pytest.raises(ProposalIsNotActive):
            await service.vote(PID, Choice.REJECT, DAVE)
        proposal = await service.get_proposal(PID)
        assert (proposal.approve, proposal.reject, proposal.pass_) == (1, 0, 0)
        assert proposal.voted == (BOB,)


class TestCreateProposal:
    """Tests for create_proposal."""

    @pytest.mark.asyncio
    async def test_create_overwrites_existing_proposal(self, unit_env):
        """Create replaces whatever is stored under the ID, votes included."""
        service = await unit_env.get(ProposalService)
        await service.create_proposal(PID, make_payload("first"), ALICE)
        await service.vote(PID, Choice.APPROVE, BOB)

        await service.create_proposal(PID, make_payload("second"), CAROL)

        proposal = await service.get_proposal(PID)
        assert proposal.description == "second"
        assert proposal.owner == CAROL
        assert proposal.voted == ()

    @pytest.mark.asyncio
    async def test_count_ignores_overwrites(self, unit_env):
        """Count equals the number of distinct IDs created."""
        service = await unit_env.get(ProposalService)

        await service.create_proposal(ProposalId(1), make_payload(), ALICE)
        await service.create_proposal(ProposalId(2), make_payload(), ALICE)
        await service.create_proposal(ProposalId(1), make_payload(), BOB)

        assert await service.count() == 2

    @pytest.mark.asyncio
    async def test_oversized_create_leaves_store_unchanged(self, unit_env):
        service = await unit_env.get(ProposalService)
        repo = await unit_env.get(ProposalRepository)
        await service.create_proposal(PID, make_payload("fits"), ALICE)
        before = repo.raw(PID)

        with pytest.raises(RecordTooLargeError):
            await service.create_proposal(PID, make_payload("x" * 5000), ALICE)

        assert repo.raw(PID) == before
        assert await service.count() == 1

    @pytest.mark.asyncio
    async def test_create_replaces_unreadable_record(self):
        repo = InMemoryProposalRepository(max_size=5000)
        service = ProposalService(repo, KeyedLock(), GovernanceSettings())
        repo._records[PID] = b"not a proposal"

        created = await service.create_proposal(PID, make_payload("fresh"), BOB)

        assert created.owner == BOB
        assert (await service.get_proposal(PID)).description == "fresh"
        assert await service.count() == 1

    @pytest.mark.asyncio
    async def test_guarded_create_rejects_foreign_overwrite(self):
        """With overwrite guarding on, only the owner may recreate an ID."""
        repo = InMemoryProposalRepository(max_size=5000)
        service = ProposalService(
            repo, KeyedLock(), GovernanceSettings(guard_create_overwrite=True)
        )
        await service.create_proposal(PID, make_payload("mine"), ALICE)
        before = repo.raw(PID)

        with pytest.raises(AccessRejected):
            await service.create_proposal(PID, make_payload("theirs"), BOB)
        assert repo.raw(PID) == before

        # The owner may still replace it
        await service.create_proposal(PID, make_payload("mine again"), ALICE)
        assert (await service.get_proposal(PID)).description == "mine again"


class TestEditProposal:
    """Tests for edit_proposal."""

    @pytest.mark.asyncio
    async def test_owner_edit_keeps_votes_and_owner(self, unit_env):
        service = await unit_env.get(ProposalService)
        await service.create_proposal(PID, make_payload("old"), ALICE)
        await service.vote(PID, Choice.PASS, BOB)

        await service.edit_proposal(PID, make_payload("new", is_active=False), ALICE)

        proposal = await service.get_proposal(PID)
        assert proposal.description == "new"
        assert proposal.is_active is False
        assert proposal.pass_ == 1
        assert proposal.voted == (BOB,)
        assert proposal.owner == ALICE

    @pytest.mark.asyncio
    async def test_edit_reopens_closed_proposal(self, unit_env):
        service = await unit_env.get(ProposalService)
        await service.create_proposal(PID, make_payload(), ALICE)
        await service.close_proposal(PID, ALICE)

        await service.edit_proposal(PID, make_payload(is_active=True), ALICE)
        await service.vote(PID, Choice.APPROVE, BOB)

        assert (await service.get_proposal(PID)).approve == 1

    @pytest.mark.asyncio
    async def test_non_owner_edit_leaves_bytes_unchanged(self, unit_env):
        service = await unit_env.get(ProposalService)
        repo = await unit_env.get(ProposalRepository)
        await service.create_proposal(PID, make_payload("D"), ALICE)
        before = repo.raw(PID)

        with pytest.raises(AccessRejected):
            await service.edit_proposal(PID, make_payload("hijack"), BOB)

        assert repo.raw(PID) == before

    @pytest.mark.asyncio
    async def test_edit_unknown_proposal(self, unit_env):
        service = await unit_env.get(ProposalService)

        with pytest.raises(NoSuchProposal):
            await service.edit_proposal(PID, make_payload(), ALICE)

    @pytest.mark.asyncio
    async def test_oversized_edit_leaves_bytes_unchanged(self, unit_env):
        service = await unit_env.get(ProposalService)
        repo = await unit_env.get(ProposalRepository)
        await service.create_proposal(PID, make_payload("D"), ALICE)
        before = repo.raw(PID)

        with pytest.raises(RecordTooLargeError):
            await service.edit_proposal(PID, make_payload("x" * 5000), ALICE)

        assert repo.raw(PID) == before


class TestCloseProposal:
    """Tests for close_proposal."""

    @pytest.mark.asyncio
    async def test_close_twice_is_idempotent(self, unit_env):
        service = await unit_env.get(ProposalService)
        repo = await unit_env.get(ProposalRepository)
        await service.create_proposal(PID, make_payload(), ALICE)

        await service.close_proposal(PID, ALICE)
        after_first = repo.raw(PID)
        await service.close_proposal(PID, ALICE)

        assert repo.raw(PID) == after_first

    @pytest.mark.asyncio
    async def test_non_owner_close_leaves_bytes_unchanged(self, unit_env):
        service = await unit_env.get(ProposalService)
        repo = await unit_env.get(ProposalRepository)
        await service.create_proposal(PID, make_payload(), ALICE)
        before = repo.raw(PID)

        with pytest.raises(AccessRejected):
            await service.close_proposal(PID, BOB)

        assert repo.raw(PID) == before

    @pytest.mark.asyncio
    async def test_close_unknown_proposal(self, unit_env):
        service = await unit_env.get(ProposalService)

        with pytest.raises(NoSuchProposal):
            await service.close_proposal(PID, ALICE)


class TestVote:
    """Tests for vote."""

    @pytest.mark.asyncio
    async def test_vote_unknown_proposal(self, unit_env):
        service = await unit_env.get(ProposalService)

        with pytest.raises(NoSuchProposal):
            await service.vote(PID, Choice.APPROVE, BOB)

    @pytest.mark.asyncio
    async def test_closed_is_reported_before_repeat_vote(self, unit_env):
        """A voter retrying on a closed proposal sees ProposalIsNotActive."""
        service = await unit_env.get(ProposalService)
        await service.create_proposal(PID, make_payload(), ALICE)
        await service.vote(PID, Choice.APPROVE, BOB)
        await service.close_proposal(PID, ALICE)

        with pytest.raises(ProposalIsNotActive):
            await service.vote(PID, Choice.APPROVE, BOB)

    @pytest.mark.asyncio
    async def test_owner_may_vote(self, unit_env):
        service = await unit_env.get(ProposalService)
        await service.create_proposal(PID, make_payload(), ALICE)

        await service.vote(PID, Choice.REJECT, ALICE)

        assert (await service.get_proposal(PID)).reject == 1

    @pytest.mark.asyncio
    async def test_concurrent_votes_are_all_counted(self):
        """Interleaved votes on one proposal never lose an update."""
        repo = YieldingProposalRepository(max_size=5000)
        service = ProposalService(repo, KeyedLock(), GovernanceSettings())
        await service.create_proposal(PID, make_payload(), ALICE)
        voters = [Principal(f"voter-{i}") for i in range(25)]

        await asyncio.gather(
            *(service.vote(PID, Choice.APPROVE, voter) for voter in voters)
        )

        proposal = await service.get_proposal(PID)
        assert proposal.approve == 25
        assert set(proposal.voted) == set(voters)

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_vote_counts_once(self):
        repo = YieldingProposalRepository(max_size=5000)
        service = ProposalService(repo, KeyedLock(), GovernanceSettings())
        await service.create_proposal(PID, make_payload(), ALICE)

        results = await asyncio.gather(
            service.vote(PID, Choice.APPROVE, BOB),
            service.vote(PID, Choice.APPROVE, BOB),
            return_exceptions=True,
        )

        assert sum(isinstance(r, AlreadyVoted) for r in results) == 1
        assert (await service.get_proposal(PID)).approve == 1

    @pytest.mark.asyncio
    async def test_vote_that_outgrows_record_bound_is_rejected(self):
        repo = InMemoryProposalRepository(max_size=5000)
        service = ProposalService(repo, KeyedLock(), GovernanceSettings())
        await service.create_proposal(PID, make_payload(), ALICE)
        voters = [Principal(f"{i:03d}" + "v" * 247) for i in range(25)]

        accepted = 0
        with pytest.raises(RecordTooLargeError):
            for voter in voters:
                before = repo.raw(PID)
                await service.vote(PID, Choice.APPROVE, voter)
                accepted += 1

        assert 0 < accepted < len(voters)
        assert repo.raw(PID) == before
        proposal = await service.get_proposal(PID)
        assert proposal.approve == accepted
        assert voters[accepted] not in proposal.voted


class YieldingProposalRepository(InMemoryProposalRepository):
    """Store that hands control back to the event loop on every access."""

    async def get(self, key):
        await asyncio.sleep(0)
        return await super().get(key)

    async def insert(self, key, record):
        await asyncio.sleep(0)
        return await super().insert(key, record)


class ForgetfulProposalRepository(InMemoryProposalRepository):
    """Store that never reports a previous record on write."""

    async def insert(self, key, record):
        await super().insert(key, record)
        return None


class TestUpdateError:
    """Tests for unconfirmed write-backs."""

    @pytest.mark.asyncio
    async def test_unconfirmed_write_back_raises_update_error(self):
        repo = ForgetfulProposalRepository(max_size=5000)
        service = ProposalService(repo, KeyedLock(), GovernanceSettings())
        await repo.insert(PID, Proposal.new(make_payload(), owner=ALICE))

        with pytest.raises(UpdateError):
            await service.vote(PID, Choice.APPROVE, BOB)
