"""JWT token utilities.

Tokens carry the caller's principal in the ``sub`` claim. They are the only
source of caller identity at the HTTP boundary.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from council.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(principal: str, settings: AuthSettings) -> str:
    """Create a JWT token for a principal.

    Args:
        principal: Principal text the token identifies
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": principal,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
