"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime
from typing import Any, Dict, Mapping
from uuid import UUID

from botlist.domain.model import Bot, BotDetails, BotVotes
from botlist.domain.value import AppLibrary, BotId, BotTag, UserId


def row_to_bot(
    row: Dict[str, Any], voters: Mapping[UserId, datetime] | None = None
) -> Bot:
    """Convert database row to Bot domain model.

    Args:
        row: Database row as dict
        voters: Latest vote timestamp per user, from bot_voters

    Returns:
        Bot domain model
    """
    return Bot(
        id=BotId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        owner_id=UserId(row["owner_id"]),
        other_owners=[UserId(o) for o in row.get("other_owners") or []],
        name=row["name"],
        prefix=row["prefix"],
        tags=[BotTag(t) for t in row["tags"]],
        library=AppLibrary(row["library"]),
        short_description=row["short_description"],
        long_description=row.get("long_description"),
        is_html=row["is_html"],
        custom_invite_link=row.get("custom_invite_link"),
        support_server=row.get("support_server"),
        website=row.get("website"),
        votes=BotVotes(current=row["votes"]),
        voters=dict(voters or {}),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def bot_to_dict(bot: Bot) -> Dict[str, Any]:
    """Convert Bot domain model to database dict.

    Voters live in their own table and are excluded.

    Args:
        bot: Bot domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = bot.model_dump(mode="json", exclude={"voters", "votes"})
    data["id"] = bot.id
    data["votes"] = bot.votes.current
    data["created_at"] = bot.created_at
    data["updated_at"] = bot.updated_at
    return data


def bot_details_to_dict(bot: Bot) -> Dict[str, Any]:
    """Convert the owner-editable fields of a bot to a database dict.

    Args:
        bot: Bot domain model

    Returns:
        Dict suitable for a database update
    """
    data = bot.model_dump(mode="json", include=set(BotDetails.model_fields))
    data["updated_at"] = bot.updated_at
    return data
