"""Domain layer errors.

Every business-rule violation has its own class with a stable ``code``;
the interface layer reports that code to callers as the error kind.
"""


class DomainError(Exception):
    """Base domain error."""

    code: str = "DomainError"


class NoSuchProposal(DomainError):
    """Raised when an operation targets a proposal id that is not stored."""

    code = "NoSuchProposal"

    def __init__(self, proposal_id: int):
        self.proposal_id = proposal_id
        super().__init__(f"Proposal not found: {proposal_id}")


class AccessRejected(DomainError):
    """Raised when a non-owner attempts an owner-only mutation."""

    code = "AccessRejected"

    def __init__(self, resource: str, resource_id: int, caller: str):
        self.resource = resource
        self.resource_id = resource_id
        self.caller = caller
        super().__init__(f"{caller} is not the owner of {resource} {resource_id}")


class ProposalIsNotActive(DomainError):
    """Raised when voting on a closed proposal."""

    code = "ProposalIsNotActive"

    def __init__(self, proposal_id: int):
        self.proposal_id = proposal_id
        super().__init__(f"Proposal {proposal_id} is not active")


class AlreadyVoted(DomainError):
    """Raised when an identity votes twice on the same proposal."""

    code = "AlreadyVoted"

    def __init__(self, proposal_id: int, voter: str):
        self.proposal_id = proposal_id
        self.voter = voter
        super().__init__(f"{voter} already voted on proposal {proposal_id}")


class InvalidChoice(DomainError):
    """Raised when a vote carries a value outside the Choice enumeration.

    The HTTP boundary only accepts Choice members, so this is not expected
    in practice.
    """

    code = "InvalidChoice"

    def __init__(self, choice: object):
        self.choice = choice
        super().__init__(f"Invalid choice: {choice!r}")


class UpdateError(DomainError):
    """Raised when the store does not confirm an overwrite of an existing record."""

    code = "UpdateError"

    def __init__(self, resource: str, resource_id: int):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Update of {resource} {resource_id} was not confirmed")


class PostNotFound(DomainError):
    """Raised when a requested post is not stored."""

    code = "PostNotFound"

    def __init__(self, post_id: int):
        self.post_id = post_id
        super().__init__(f"Post not found: {post_id}")


class AlreadyLiked(DomainError):
    """Raised when an identity likes the same post twice."""

    code = "AlreadyLiked"

    def __init__(self, post_id: int, caller: str):
        self.post_id = post_id
        self.caller = caller
        super().__init__(f"{caller} already liked post {post_id}")
