"""Domain model entities for Council."""

from council.domain.model.post import Post, PostPayload
from council.domain.model.proposal import Proposal, ProposalPayload

__all__ = [
    "Post",
    "PostPayload",
    "Proposal",
    "ProposalPayload",
]
