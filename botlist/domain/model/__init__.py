"""Domain model entities for the bot directory."""

from botlist.domain.model.bot import Bot, BotDetails, BotVotes
from botlist.domain.model.vote import VoteOutcome

__all__ = [
    "Bot",
    "BotDetails",
    "BotVotes",
    "VoteOutcome",
]
