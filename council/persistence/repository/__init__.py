"""Persistence implementations of Council repositories."""

from council.persistence.repository.post import SqlPostRepository
from council.persistence.repository.proposal import SqlProposalRepository
from council.persistence.repository.record import SqlRecordStore
from council.persistence.repository.sequence import SqlSequenceAllocator

__all__ = [
    "SqlPostRepository",
    "SqlProposalRepository",
    "SqlRecordStore",
    "SqlSequenceAllocator",
]
