"""JWT token domain service.

Resolves the calling identity from a signed token. The resulting Principal
is the only identity the proposal and feed services trust.
"""

import logfire

from council.config import AuthSettings
from council.domain.value import Principal
from council.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, principal: Principal) -> str:
        """Create JWT token for a principal.

        Args:
            principal: Identity the token will carry

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", principal=str(principal)):
            token = create_token(principal.root, self.auth_settings)
            logfire.info("JWT token created", principal=str(principal))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", principal=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Extract the principal from a JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Principal(payload.sub)
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
