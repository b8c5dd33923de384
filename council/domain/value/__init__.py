"""Domain value objects for Council."""

from council.domain.value.identifiers import MAX_RECORD_KEY, PostId, ProposalId
from council.domain.value.types import Choice, PostType, Principal

__all__ = [
    # Identifiers
    "MAX_RECORD_KEY",
    "PostId",
    "ProposalId",
    # Types
    "Choice",
    "PostType",
    "Principal",
]
