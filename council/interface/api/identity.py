"""Caller identity resolution at the HTTP boundary.

The caller is whoever holds a valid token: the ``Authorization: Bearer``
header wins over the ``auth_token`` cookie. Request bodies are never
consulted.
"""

from fastapi import HTTPException, status

from council.domain.service import JWTService
from council.domain.value import Principal


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the bearer token from the header, falling back to the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token


def require_caller(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
    action: str,
) -> Principal:
    """Resolve the authenticated caller or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        authorization: Authorization header value
        auth_token: Token from cookie
        action: What the caller tried to do (for the error message)

    Returns:
        The caller's principal

    Raises:
        HTTPException: If no valid token was presented
    """
    principal = jwt_service.get_principal_from_token(
        extract_token(authorization, auth_token)
    )
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return principal
