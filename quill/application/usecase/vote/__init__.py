"""Vote use cases."""

from .get_votes import GetVotesRequest, GetVotesResponse, GetVotesUseCase
from .toggle_vote import ToggleVoteRequest, ToggleVoteResponse, ToggleVoteUseCase

__all__ = [
    "GetVotesRequest",
    "GetVotesResponse",
    "GetVotesUseCase",
    "ToggleVoteRequest",
    "ToggleVoteResponse",
    "ToggleVoteUseCase",
]
