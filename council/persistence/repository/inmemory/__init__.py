"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .proposal import InMemoryProposalRepository
from .record import InMemoryRecordStore
from .sequence import InMemorySequenceAllocator

__all__ = [
    "InMemoryPostRepository",
    "InMemoryProposalRepository",
    "InMemoryRecordStore",
    "InMemorySequenceAllocator",
]
