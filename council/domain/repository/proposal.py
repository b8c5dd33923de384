"""Proposal repository interface."""

from council.domain.model.proposal import Proposal
from council.domain.repository.record import RecordStore


class ProposalRepository(RecordStore[Proposal]):
    """Durable store of proposals keyed by caller-chosen ProposalId."""
