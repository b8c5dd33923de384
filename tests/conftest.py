"""Test configuration and fixtures."""

import logfire

from council.config import AuthSettings
from council.domain.model.proposal import ProposalPayload
from council.domain.service import JWTService
from council.domain.value import Principal

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


ALICE = Principal("alice")
BOB = Principal("bob")
CAROL = Principal("carol")


def make_payload(
    description: str = "Fund the community garden", is_active: bool = True
) -> ProposalPayload:
    """Helper function to build proposal payloads for tests."""
    return ProposalPayload(description=description, is_active=is_active)


def auth_headers(principal: Principal | str) -> dict[str, str]:
    """Bearer header carrying a token for ``principal``.

    Signed with the default auth settings, which is what the app under test
    loads from the environment.
    """
    if isinstance(principal, str):
        principal = Principal(principal)
    token = JWTService(AuthSettings()).create_token(principal)
    return {"Authorization": f"Bearer {token}"}
