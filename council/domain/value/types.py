"""Domain value objects for Council.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from council.domain.value.common import RootValueObject


class Choice(str, Enum):
    """Vote category on a proposal.

    Each choice is an independent tally; a voter picks exactly one.
    """

    APPROVE = "Approve"
    REJECT = "Reject"
    PASS = "Pass"


class PostType(str, Enum):
    """Access tier of a feed post."""

    FREE = "Free"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"
    PAID = "Paid"


class Principal(RootValueObject[str]):
    """Identity of a caller.

    Opaque and only ever compared for equality: it decides proposal
    ownership and vote uniqueness. Principals come from verified tokens at
    the boundary, never from request payloads.
    """

    @field_validator("root")
    @classmethod
    def validate_principal(cls, v: str) -> str:
        """Validate principal is non-blank and within length limits."""
        if not v.strip():
            raise ValueError("Principal must not be blank")
        if len(v) > 255:
            raise ValueError("Principal must be 1-255 characters")
        return v
