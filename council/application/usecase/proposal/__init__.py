"""Proposal use cases."""

from .close_proposal import CloseProposalRequest, CloseProposalUseCase
from .count_proposals import CountProposalsResponse, CountProposalsUseCase
from .create_proposal import CreateProposalRequest, CreateProposalUseCase
from .edit_proposal import EditProposalRequest, EditProposalUseCase
from .get_proposal import GetProposalRequest, GetProposalUseCase
from .list_proposals import (
    ListProposalsRequest,
    ListProposalsResponse,
    ListProposalsUseCase,
)
from .response import ProposalResponse
from .vote import VoteRequest, VoteUseCase

__all__ = [
    "CloseProposalRequest",
    "CloseProposalUseCase",
    "CountProposalsResponse",
    "CountProposalsUseCase",
    "CreateProposalRequest",
    "CreateProposalUseCase",
    "EditProposalRequest",
    "EditProposalUseCase",
    "GetProposalRequest",
    "GetProposalUseCase",
    "ListProposalsRequest",
    "ListProposalsResponse",
    "ListProposalsUseCase",
    "ProposalResponse",
    "VoteRequest",
    "VoteUseCase",
]
