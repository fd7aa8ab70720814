"""Domain value objects for the bot directory.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime
from enum import Enum, IntEnum

from pydantic import Field, field_validator

from botlist.domain.value.common import ValueObject
from botlist.domain.value.identifiers import UserId


class Role(IntEnum):
    """Permission tier of an actor.

    Ordered: ``member < admin < owner``. ``owner`` is the site owner tier,
    unrelated to owning a bot.
    """

    MEMBER = 0
    ADMIN = 1
    OWNER = 2


class BotTag(str, Enum):
    """Category a bot can be listed under."""

    MODERATION = "moderation"
    MUSIC = "music"
    FUN = "fun"
    UTILITY = "utility"
    ECONOMY = "economy"
    GAMES = "games"
    LEVELING = "leveling"
    SOCIAL = "social"
    ANIME = "anime"
    MEMES = "memes"
    ROLEPLAY = "roleplay"
    LOGGING = "logging"
    MULTIPURPOSE = "multipurpose"


class AppLibrary(str, Enum):
    """Library the bot is built with."""

    DISCORD_JS = "discord.js"
    DISCORD_PY = "discord.py"
    ERIS = "eris"
    DISCORD_NET = "discord.net"
    DSHARPPLUS = "dsharpplus"
    JDA = "jda"
    DISCORDGO = "discordgo"
    SERENITY = "serenity"
    OTHER = "other"


class BotSortOrder(str, Enum):
    """Sort order for bot listings."""

    RECENT = "recent"  # created_at DESC, id ASC
    MOST_VOTED = "most_voted"  # votes DESC, created_at DESC, id ASC


class Actor(ValueObject):
    """Verified caller identity supplied by the external auth guard."""

    user_id: UserId
    role: Role = Role.MEMBER


class ListingQuery(ValueObject):
    """Normalised listing query.

    Pages are 1-indexed. ``tags`` filters by non-empty intersection with the
    bot's tag set; an empty tuple means no tag filter.
    """

    search: str = ""
    sort: BotSortOrder = BotSortOrder.RECENT
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=18, ge=1)
    tags: tuple[BotTag, ...] = ()

    @field_validator("search")
    @classmethod
    def strip_search(cls, v: str) -> str:
        """Ignore surrounding whitespace in the search text."""
        return v.strip()

    @property
    def offset(self) -> int:
        """Number of items skipped before this page."""
        return (self.page - 1) * self.page_size


class CooldownDecision(ValueObject):
    """Outcome of evaluating the vote cooldown for one (bot, user) pair."""

    allowed: bool
    next_eligible_at: datetime | None = None
