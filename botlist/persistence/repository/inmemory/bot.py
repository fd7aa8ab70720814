"""In-memory bot repository for testing."""

from datetime import datetime, timedelta
from typing import Optional

from botlist.domain.model import Bot, BotVotes, VoteOutcome
from botlist.domain.repository.bot import BotRepository
from botlist.domain.service import RankingEngine, VoteCooldownRule
from botlist.domain.value import BotId, ListingQuery, UserId


class InMemoryBotRepository(BotRepository):
    """In-memory implementation of BotRepository for testing.

    Coroutines never await between reading and writing ``_bots``, so each
    call runs as one step on the event loop.
    """

    def __init__(self) -> None:
        self._bots: dict[BotId, Bot] = {}
        self._ranking = RankingEngine()

    async def find_by_id(self, bot_id: BotId) -> Optional[Bot]:
        """Find a bot by ID."""
        return self._bots.get(bot_id)

    async def search(self, query: ListingQuery) -> list[Bot]:
        """Find one page of bots matching a listing query."""
        return self._ranking.select(self._bots.values(), query)

    async def count(self) -> int:
        """Count all bots."""
        return len(self._bots)

    async def insert(self, bot: Bot) -> Bot:
        """Insert a new bot."""
        self._bots[bot.id] = bot
        return bot

    async def replace(self, bot: Bot) -> Optional[Bot]:
        """Replace descriptive fields, keeping stored votes and voters."""
        current = self._bots.get(bot.id)
        if current is None:
            return None

        updated = bot.model_copy(
            update={"votes": current.votes, "voters": current.voters}
        )
        self._bots[bot.id] = updated
        return updated

    async def delete(self, bot_id: BotId) -> bool:
        """Delete a bot."""
        return self._bots.pop(bot_id, None) is not None

    async def atomic_vote(
        self,
        bot_id: BotId,
        user_id: UserId,
        now: datetime,
        cooldown_window: timedelta,
    ) -> Optional[VoteOutcome]:
        """Check the cooldown and record a vote."""
        bot = self._bots.get(bot_id)
        if bot is None:
            return None

        decision = VoteCooldownRule(cooldown_window).evaluate(
            bot.last_vote_of(user_id), now
        )
        if not decision.allowed:
            return VoteOutcome(
                bot=bot, accepted=False, next_eligible_at=decision.next_eligible_at
            )

        # Create updated bot (since bots are immutable)
        updated = bot.model_copy(
            update={
                "votes": BotVotes(current=bot.votes.current + 1),
                "voters": {**bot.voters, user_id: now},
            }
        )
        self._bots[bot_id] = updated
        return VoteOutcome(bot=updated, accepted=True)

    async def reset_all_votes(self) -> None:
        """Zero every counter and clear all voters."""
        for bot_id, bot in list(self._bots.items()):
            self._bots[bot_id] = bot.model_copy(
                update={"votes": BotVotes(), "voters": {}}
            )
