"""Proposal routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Path, Query, status
from pydantic import BaseModel

from council.application.usecase.proposal import (
    CloseProposalRequest,
    CloseProposalUseCase,
    CountProposalsResponse,
    CountProposalsUseCase,
    CreateProposalRequest,
    CreateProposalUseCase,
    EditProposalRequest,
    EditProposalUseCase,
    GetProposalRequest,
    GetProposalUseCase,
    ListProposalsRequest,
    ListProposalsResponse,
    ListProposalsUseCase,
    ProposalResponse,
    VoteRequest,
    VoteUseCase,
)
from council.domain.service import JWTService
from council.domain.value import MAX_RECORD_KEY, Choice
from council.interface.api.identity import require_caller

router = APIRouter(prefix="/proposals", tags=["proposals"], route_class=DishkaRoute)

ProposalIdPath = Annotated[
    int, Path(ge=0, le=MAX_RECORD_KEY, description="Proposal ID (u64)")
]


class ProposalAPIRequest(BaseModel):
    """API request body for creating or editing a proposal."""

    description: str
    is_active: bool


class VoteAPIRequest(BaseModel):
    """API request body for casting a vote."""

    choice: Choice


@router.get("/count", response_model=CountProposalsResponse)
async def count_proposals(
    count_use_case: FromDishka[CountProposalsUseCase],
) -> CountProposalsResponse:
    """Count stored proposals."""
    return await count_use_case.execute()


@router.get("", response_model=ListProposalsResponse)
async def list_proposals(
    list_use_case: FromDishka[ListProposalsUseCase],
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=30, ge=1, le=100),
) -> ListProposalsResponse:
    """List proposals in ID order."""
    return await list_use_case.execute(
        ListProposalsRequest(offset=offset, limit=limit)
    )


@router.get("/{proposal_id}", response_model=ProposalResponse)
async def get_proposal(
    get_use_case: FromDishka[GetProposalUseCase],
    proposal_id: ProposalIdPath,
) -> ProposalResponse:
    """Get a proposal by ID.

    Raises:
        NoSuchProposal: Rendered as 404
    """
    return await get_use_case.execute(GetProposalRequest(proposal_id=proposal_id))


@router.put("/{proposal_id}", response_model=ProposalResponse)
async def create_proposal(
    request: ProposalAPIRequest,
    create_use_case: FromDishka[CreateProposalUseCase],
    jwt_service: FromDishka[JWTService],
    proposal_id: ProposalIdPath,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ProposalResponse:
    """Create a proposal under a caller-chosen ID.

    Requires authentication. The caller becomes the owner. A proposal
    already stored under the ID is replaced.

    Args:
        request: Description and initial active flag
        create_use_case: Create proposal use case from DI
        jwt_service: JWT service for token verification (injected)
        proposal_id: Proposal ID
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        The created proposal
    """
    caller = require_caller(jwt_service, authorization, auth_token, "create proposals")
    return await create_use_case.execute(
        CreateProposalRequest(
            proposal_id=proposal_id,
            description=request.description,
            is_active=request.is_active,
            caller=caller.root,
        )
    )


@router.patch("/{proposal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def edit_proposal(
    request: ProposalAPIRequest,
    edit_use_case: FromDishka[EditProposalUseCase],
    jwt_service: FromDishka[JWTService],
    proposal_id: ProposalIdPath,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Edit a proposal's description and active flag.

    Requires authentication as the proposal's owner.

    Raises:
        NoSuchProposal: Rendered as 404
        AccessRejected: Rendered as 403
    """
    caller = require_caller(jwt_service, authorization, auth_token, "edit proposals")
    await edit_use_case.execute(
        EditProposalRequest(
            proposal_id=proposal_id,
            description=request.description,
            is_active=request.is_active,
            caller=caller.root,
        )
    )


@router.post("/{proposal_id}/close", status_code=status.HTTP_204_NO_CONTENT)
async def close_proposal(
    close_use_case: FromDishka[CloseProposalUseCase],
    jwt_service: FromDishka[JWTService],
    proposal_id: ProposalIdPath,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Close a proposal to further votes.

    Requires authentication as the proposal's owner.
    """
    caller = require_caller(jwt_service, authorization, auth_token, "close proposals")
    await close_use_case.execute(
        CloseProposalRequest(proposal_id=proposal_id, caller=caller.root)
    )


@router.post("/{proposal_id}/votes", status_code=status.HTTP_204_NO_CONTENT)
async def vote(
    request: VoteAPIRequest,
    vote_use_case: FromDishka[VoteUseCase],
    jwt_service: FromDishka[JWTService],
    proposal_id: ProposalIdPath,
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Cast a vote on a proposal.

    Requires authentication. Each identity votes once per proposal.

    Raises:
        NoSuchProposal: Rendered as 404
        ProposalIsNotActive: Rendered as 409
        AlreadyVoted: Rendered as 409
    """
    caller = require_caller(jwt_service, authorization, auth_token, "vote")
    await vote_use_case.execute(
        VoteRequest(proposal_id=proposal_id, choice=request.choice, caller=caller.root)
    )
