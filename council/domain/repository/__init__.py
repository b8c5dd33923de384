"""Repository interfaces for the Council domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from council.domain.repository.post import PostRepository
from council.domain.repository.proposal import ProposalRepository
from council.domain.repository.record import RecordStore, check_key
from council.domain.repository.sequence import MAX_SEQUENCE_VALUE, SequenceAllocator

__all__ = [
    "MAX_SEQUENCE_VALUE",
    "PostRepository",
    "ProposalRepository",
    "RecordStore",
    "SequenceAllocator",
    "check_key",
]
