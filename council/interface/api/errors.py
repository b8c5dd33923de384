"""Translation of domain and storage errors into HTTP responses.

Every error body has the shape ``{"error": <kind>, "detail": <message>}``
where ``kind`` is the error's stable code.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from council.domain.error import (
    AccessRejected,
    AlreadyLiked,
    AlreadyVoted,
    DomainError,
    InvalidChoice,
    NoSuchProposal,
    PostNotFound,
    ProposalIsNotActive,
    UpdateError,
)
from council.persistence.error import PersistenceError, RecordTooLargeError

DOMAIN_STATUS: dict[type[DomainError], int] = {
    NoSuchProposal: status.HTTP_404_NOT_FOUND,
    PostNotFound: status.HTTP_404_NOT_FOUND,
    AccessRejected: status.HTTP_403_FORBIDDEN,
    ProposalIsNotActive: status.HTTP_409_CONFLICT,
    AlreadyVoted: status.HTTP_409_CONFLICT,
    AlreadyLiked: status.HTTP_409_CONFLICT,
    InvalidChoice: 422,
    UpdateError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: Exception) -> int:
    """HTTP status for a domain or persistence error."""
    if isinstance(error, RecordTooLargeError):
        return 413
    for error_type, code in DOMAIN_STATUS.items():
        if isinstance(error, error_type):
            return code
    if isinstance(error, DomainError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(error: DomainError | PersistenceError) -> dict[str, str]:
    return {"error": error.code, "detail": str(error)}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    logfire.info(
        "Domain error", error=exc.code, status=code, path=request.url.path
    )
    return JSONResponse(status_code=code, content=error_body(exc))


async def handle_persistence_error(
    request: Request, exc: PersistenceError
) -> JSONResponse:
    code = status_for(exc)
    logfire.error(
        "Storage contract violated",
        error=exc.code,
        detail=str(exc),
        path=request.url.path,
    )
    return JSONResponse(status_code=code, content=error_body(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(PersistenceError, handle_persistence_error)
