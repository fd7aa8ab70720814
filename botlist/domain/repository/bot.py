"""Bot repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import List, Optional

from botlist.domain.model import Bot, VoteOutcome
from botlist.domain.value import BotId, ListingQuery, UserId


class BotRepository(ABC):
    """Repository for Bot aggregate.

    Defines the contract for bot persistence operations.
    Implementations live in the persistence layer and raise ``StoreError``
    when the backing store fails.
    """

    @abstractmethod
    async def find_by_id(self, bot_id: BotId) -> Optional[Bot]:
        """Find a bot by ID.

        Args:
            bot_id: The bot's unique identifier

        Returns:
            The bot (including its voters) if found, None otherwise
        """
        pass

    @abstractmethod
    async def search(self, query: ListingQuery) -> List[Bot]:
        """Find one page of bots matching a listing query.

        Filtering, ordering and pagination follow ``RankingEngine``.

        Args:
            query: Normalised listing query

        Returns:
            Ordered page of bots; empty if the page is out of range
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all directory entries.

        Returns:
            Total number of bots
        """
        pass

    @abstractmethod
    async def insert(self, bot: Bot) -> Bot:
        """Insert a new bot.

        Args:
            bot: The bot to insert

        Returns:
            The stored bot
        """
        pass

    @abstractmethod
    async def replace(self, bot: Bot) -> Optional[Bot]:
        """Replace the descriptive fields of an existing bot.

        Votes and voters held by the store are left as they are.

        Args:
            bot: Bot carrying the new descriptive fields

        Returns:
            The stored bot, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, bot_id: BotId) -> bool:
        """Delete a bot.

        Args:
            bot_id: The bot ID to delete

        Returns:
            True if a bot was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def atomic_vote(
        self,
        bot_id: BotId,
        user_id: UserId,
        now: datetime,
        cooldown_window: timedelta,
    ) -> Optional[VoteOutcome]:
        """Check the cooldown and record a vote as one atomic unit.

        If the user's last vote on this bot is older than the window (or
        absent), increments ``votes.current`` by 1 and sets the user's last
        vote timestamp to ``now``. Two concurrent calls for the same user
        resolve to exactly one acceptance.

        Args:
            bot_id: The bot being voted for
            user_id: The voting user
            now: Current time
            cooldown_window: Minimum time between two votes of the same user

        Returns:
            Vote outcome, or None if the bot does not exist
        """
        pass

    @abstractmethod
    async def reset_all_votes(self) -> None:
        """Zero every bot's vote counter and clear all voter timestamps."""
        pass
