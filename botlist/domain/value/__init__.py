"""Domain value objects for the bot directory."""

from botlist.domain.value.identifiers import BotId, UserId
from botlist.domain.value.types import (
    Actor,
    AppLibrary,
    BotSortOrder,
    BotTag,
    CooldownDecision,
    ListingQuery,
    Role,
)

__all__ = [
    # Identifiers
    "BotId",
    "UserId",
    # Types
    "Actor",
    "AppLibrary",
    "BotSortOrder",
    "BotTag",
    "CooldownDecision",
    "ListingQuery",
    "Role",
]
