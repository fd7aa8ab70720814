"""Shared request/response models for bot use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from botlist.domain.error import NotFoundError
from botlist.domain.model import Bot
from botlist.domain.value import AppLibrary, BotId, BotTag


class BotResponse(BaseModel):
    """Bot as returned to callers."""

    bot_id: str
    owner_id: str
    other_owners: list[str]
    name: str
    prefix: str
    tags: list[BotTag]
    library: AppLibrary
    short_description: str
    long_description: str | None
    is_html: bool
    custom_invite_link: str | None
    support_server: str | None
    website: str | None
    votes: int
    voters: dict[str, datetime] | None = None  # Only with owner detail
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_bot(cls, bot: Bot, include_voters: bool = False) -> "BotResponse":
        """Build a response from a domain bot."""
        return cls(
            bot_id=str(bot.id),
            owner_id=bot.owner_id,
            other_owners=list(bot.other_owners),
            name=bot.name,
            prefix=bot.prefix,
            tags=list(bot.tags),
            library=bot.library,
            short_description=bot.short_description,
            long_description=bot.long_description,
            is_html=bot.is_html,
            custom_invite_link=bot.custom_invite_link,
            support_server=bot.support_server,
            website=bot.website,
            votes=bot.votes.current,
            voters=dict(bot.voters) if include_voters else None,
            created_at=bot.created_at,
            updated_at=bot.updated_at,
        )


def parse_bot_id(raw: str) -> BotId:
    """Parse a bot ID; malformed IDs resolve to no bot.

    Raises:
        NotFoundError: If the ID is not a valid UUID
    """
    try:
        return BotId(UUID(raw))
    except ValueError:
        raise NotFoundError("Bot", raw) from None
