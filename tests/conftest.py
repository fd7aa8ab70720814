"""Test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from botlist.domain.model import Bot, BotDetails, BotVotes
from botlist.domain.value import AppLibrary, BotId, BotTag, UserId

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_details(name: str = "Test Bot", **overrides: Any) -> BotDetails:
    """Helper function to build valid bot details for tests.

    Args:
        name: Bot name
        **overrides: Any other BotDetails field

    Returns:
        Valid BotDetails
    """
    fields: dict[str, Any] = {
        "name": name,
        "prefix": "!",
        "tags": [BotTag.UTILITY],
        "library": AppLibrary.DISCORD_PY,
        "short_description": f"{name} does useful things",
    }
    fields.update(overrides)
    return BotDetails(**fields)


def make_bot(
    name: str = "Test Bot",
    *,
    owner_id: str = "owner-1",
    votes: int = 0,
    created_at: datetime = T0,
    bot_id: BotId | None = None,
    **overrides: Any,
) -> Bot:
    """Helper function to build a stored bot for tests.

    Args:
        name: Bot name
        owner_id: Submitting user
        votes: Current vote count
        created_at: Creation time (also used as updated_at)
        bot_id: Fixed ID, random if omitted
        **overrides: Any BotDetails field

    Returns:
        Bot with no voters
    """
    bot = Bot.create(
        bot_id or BotId(uuid4()),
        UserId(owner_id),
        make_details(name, **overrides),
        created_at,
    )
    return bot.model_copy(update={"votes": BotVotes(current=votes)})
