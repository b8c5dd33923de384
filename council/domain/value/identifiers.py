"""Strongly typed identifiers for Council domain entities.

Record keys are unsigned 64-bit integers. Proposal ids are chosen by the
caller; post ids are assigned by the feed's sequence allocator.
"""

from typing import NewType

MAX_RECORD_KEY = 2**64 - 1

ProposalId = NewType("ProposalId", int)
PostId = NewType("PostId", int)
