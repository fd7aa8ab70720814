"""Vote use cases."""

from .reset_votes import ResetVotesRequest, ResetVotesResponse, ResetVotesUseCase
from .vote_bot import VoteBotRequest, VoteBotResponse, VoteBotUseCase

__all__ = [
    "ResetVotesRequest",
    "ResetVotesResponse",
    "ResetVotesUseCase",
    "VoteBotRequest",
    "VoteBotResponse",
    "VoteBotUseCase",
]
