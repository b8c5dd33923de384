"""In-memory proposal repository for testing."""

from council.domain.model import Proposal
from council.domain.repository import ProposalRepository
from council.persistence.repository.inmemory.record import InMemoryRecordStore


class InMemoryProposalRepository(InMemoryRecordStore[Proposal], ProposalRepository):
    """In-memory implementation of ProposalRepository for testing."""

    model = Proposal
