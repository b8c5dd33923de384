"""Domain services."""

from .base import Service
from .feed_service import FeedService
from .jwt_service import JWTService
from .proposal_service import ProposalService

__all__ = [
    "FeedService",
    "JWTService",
    "ProposalService",
    "Service",
]
