"""Bot aggregate root.

A bot is a directory entry for a third-party integration. It carries
descriptive fields owned by its submitter plus a vote counter and the
latest vote timestamp of every user who voted for it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from botlist.domain.model.common import DomainModel
from botlist.domain.value import AppLibrary, BotId, BotTag, UserId


class BotVotes(DomainModel):
    """Running vote total of a bot."""

    current: int = Field(default=0, ge=0)


class BotDetails(DomainModel):
    """Mutable, owner-editable part of a bot.

    This is the payload of an upsert. Everything else on a bot
    (id, owner, votes, voters, creation time) is managed by the service.
    """

    name: str = Field(min_length=1, max_length=32)
    prefix: str = Field(min_length=1, max_length=15)
    tags: list[BotTag] = Field(min_length=1, max_length=6)
    library: AppLibrary
    short_description: str = Field(min_length=3, max_length=300)
    long_description: Optional[str] = Field(default=None, max_length=100000)
    is_html: bool = False
    custom_invite_link: Optional[str] = Field(default=None, max_length=255)
    support_server: Optional[str] = Field(default=None, max_length=10)
    website: Optional[str] = Field(default=None, max_length=255)
    other_owners: list[UserId] = Field(default_factory=list, max_length=5)

    @field_validator("tags")
    @classmethod
    def validate_unique_tags(cls, v: list[BotTag]) -> list[BotTag]:
        """Tags form a set; duplicates are rejected."""
        if len(set(v)) != len(v):
            raise ValueError("Tags must be unique")
        return v


# Fields an upsert is allowed to replace
_DETAIL_FIELDS = set(BotDetails.model_fields)


class Bot(BotDetails):
    """Bot aggregate root.

    Business rules:
    - ``owner_id`` and ``created_at`` never change after creation
    - ``votes.current`` only grows, except for a global reset
    - ``voters`` keeps the latest vote timestamp per user
    """

    id: BotId
    owner_id: UserId
    votes: BotVotes = Field(default_factory=BotVotes)
    voters: dict[UserId, datetime] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls, bot_id: BotId, owner_id: UserId, details: BotDetails, now: datetime
    ) -> "Bot":
        """Build a freshly submitted bot with no votes."""
        return cls(
            id=bot_id,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
            **details.model_dump(include=_DETAIL_FIELDS),
        )

    def with_details(self, details: BotDetails, now: datetime) -> "Bot":
        """Return a copy with the descriptive fields replaced.

        Identity, ownership, votes and voters are carried over untouched.
        """
        return self.model_copy(
            update={**details.model_dump(include=_DETAIL_FIELDS), "updated_at": now}
        )

    def public_view(self) -> "Bot":
        """Return a copy without the per-user vote timestamps."""
        return self.model_copy(update={"voters": {}})

    def last_vote_of(self, user_id: UserId) -> Optional[datetime]:
        """Latest accepted vote timestamp of a user, if any."""
        return self.voters.get(user_id)
