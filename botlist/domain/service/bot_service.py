"""Bot domain service."""

from contextlib import contextmanager
from typing import Iterable, Iterator, Optional
from uuid import uuid4

import logfire

from botlist.domain.error import (
    CooldownActiveError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    StoreError,
)
from botlist.domain.model import Bot, BotDetails
from botlist.domain.repository import BotRepository
from botlist.domain.value import Actor, BotId, BotSortOrder, BotTag, UserId

from .base import Service
from .clock import Clock
from .permission_policy import PermissionPolicy
from .ranking import RankingEngine
from .vote_cooldown import VoteCooldownRule


class BotService(Service):
    """Domain service for directory entries and votes."""

    def __init__(
        self,
        bot_repository: BotRepository,
        clock: Clock,
        cooldown_rule: VoteCooldownRule,
        permission_policy: PermissionPolicy,
        ranking_engine: RankingEngine,
    ) -> None:
        """Initialize bot service.

        Args:
            bot_repository: Bot repository
            clock: Source of the current time
            cooldown_rule: Vote cooldown rule
            permission_policy: Mutation permission policy
            ranking_engine: Listing query builder
        """
        self.bot_repository = bot_repository
        self.clock = clock
        self.cooldown_rule = cooldown_rule
        self.permission_policy = permission_policy
        self.ranking_engine = ranking_engine

    @contextmanager
    def _store_call(self, operation: str) -> Iterator[None]:
        """Turn store failures into InternalError."""
        try:
            yield
        except StoreError as e:
            logfire.error("Store failure", operation=operation, error=str(e))
            raise InternalError(f"Failed to {operation}") from e

    async def _get_or_raise(self, bot_id: BotId) -> Bot:
        with self._store_call("load bot"):
            bot = await self.bot_repository.find_by_id(bot_id)
        if bot is None:
            logfire.warn("Bot not found", bot_id=str(bot_id))
            raise NotFoundError("Bot", str(bot_id))
        return bot

    async def show(self, bot_id: BotId, include_owner_detail: bool = False) -> Bot:
        """Get a bot by ID.

        Args:
            bot_id: Bot ID
            include_owner_detail: Keep the per-user vote timestamps

        Returns:
            The bot

        Raises:
            NotFoundError: If bot not found
        """
        with logfire.span("bot_service.show", bot_id=str(bot_id)):
            bot = await self._get_or_raise(bot_id)
            return bot if include_owner_detail else bot.public_view()

    async def list_bots(
        self,
        search: str = "",
        sort: BotSortOrder = BotSortOrder.RECENT,
        page: int = 1,
        page_size: Optional[int] = None,
        tags: Optional[Iterable[BotTag]] = None,
    ) -> list[Bot]:
        """List one page of bots.

        Args:
            search: Case-insensitive text matched against name and descriptions
            sort: Ranking to apply
            page: 1-indexed page number (values below 1 read as 1)
            page_size: Items per page (defaults to the configured listing size)
            tags: Only bots sharing at least one of these tags

        Returns:
            Ordered page of bots, possibly empty
        """
        query = self.ranking_engine.query(search, sort, page, page_size, tags)
        with logfire.span(
            "bot_service.list",
            search=query.search,
            sort=query.sort.value,
            page=query.page,
            page_size=query.page_size,
            tags=[t.value for t in query.tags],
        ):
            with self._store_call("search bots"):
                bots = await self.bot_repository.search(query)
            logfire.info("Bots listed", count=len(bots))
            return [bot.public_view() for bot in bots]

    async def top(self) -> list[Bot]:
        """List the most voted bots."""
        with logfire.span("bot_service.top"):
            with self._store_call("search bots"):
                bots = await self.bot_repository.search(
                    self.ranking_engine.top_query()
                )
            return [bot.public_view() for bot in bots]

    async def count(self) -> int:
        """Count all directory entries."""
        with logfire.span("bot_service.count"):
            with self._store_call("count bots"):
                return await self.bot_repository.count()

    async def upsert(
        self, details: BotDetails, actor: Actor, bot_id: Optional[BotId] = None
    ) -> Bot:
        """Create a bot, or update an existing one.

        Without ``bot_id`` a new bot owned by the actor is created. With
        ``bot_id`` the existing bot's descriptive fields are replaced; votes,
        voters, owner and creation time are kept.

        Args:
            details: New descriptive fields
            actor: Verified caller
            bot_id: ID of the bot to update, None to create

        Returns:
            Created or updated bot

        Raises:
            NotFoundError: If updating a bot that does not exist
            ForbiddenError: If the actor may not update this bot
            InternalError: If the store rejects the write
        """
        if bot_id is None:
            return await self._create(details, actor)
        return await self._update(bot_id, details, actor)

    async def _create(self, details: BotDetails, actor: Actor) -> Bot:
        bot = Bot.create(BotId(uuid4()), actor.user_id, details, self.clock.now())
        with logfire.span(
            "bot_service.create", bot_id=str(bot.id), owner_id=actor.user_id
        ):
            with self._store_call("create bot"):
                saved = await self.bot_repository.insert(bot)
            logfire.info("Bot created", bot_id=str(saved.id), name=saved.name)
            return saved

    async def _update(self, bot_id: BotId, details: BotDetails, actor: Actor) -> Bot:
        with logfire.span(
            "bot_service.update", bot_id=str(bot_id), actor_id=actor.user_id
        ):
            existing = await self._get_or_raise(bot_id)

            if not self.permission_policy.can_mutate(
                actor.role, existing.owner_id, actor.user_id
            ):
                logfire.warn(
                    "Update forbidden", bot_id=str(bot_id), actor_id=actor.user_id
                )
                raise ForbiddenError("update", str(bot_id), actor.user_id)

            with self._store_call("update bot"):
                saved = await self.bot_repository.replace(
                    existing.with_details(details, self.clock.now())
                )
            if saved is None:
                logfire.error("Bot vanished during update", bot_id=str(bot_id))
                raise InternalError(f"Failed to update bot {bot_id}")

            logfire.info("Bot updated", bot_id=str(bot_id))
            return saved

    async def delete(self, bot_id: BotId, actor: Actor) -> bool:
        """Delete a bot.

        Deleting an absent bot is not an error.

        Args:
            bot_id: Bot ID
            actor: Verified caller

        Returns:
            True if the bot was deleted, False if it did not exist

        Raises:
            ForbiddenError: If the actor may not delete this bot
        """
        with logfire.span(
            "bot_service.delete", bot_id=str(bot_id), actor_id=actor.user_id
        ):
            with self._store_call("load bot"):
                existing = await self.bot_repository.find_by_id(bot_id)
            if existing is None:
                logfire.info("Bot already absent", bot_id=str(bot_id))
                return False

            if not self.permission_policy.can_mutate(
                actor.role, existing.owner_id, actor.user_id
            ):
                logfire.warn(
                    "Delete forbidden", bot_id=str(bot_id), actor_id=actor.user_id
                )
                raise ForbiddenError("delete", str(bot_id), actor.user_id)

            with self._store_call("delete bot"):
                deleted = await self.bot_repository.delete(bot_id)
            logfire.info("Bot deleted", bot_id=str(bot_id), deleted=deleted)
            return deleted

    async def vote(self, bot_id: BotId, user_id: UserId) -> Bot:
        """Vote for a bot.

        The cooldown check and the increment happen in one atomic store call.

        Args:
            bot_id: Bot ID
            user_id: Voting user

        Returns:
            Updated bot

        Raises:
            NotFoundError: If bot not found
            CooldownActiveError: If the user voted for this bot too recently
        """
        with logfire.span("bot_service.vote", bot_id=str(bot_id), user_id=user_id):
            now = self.clock.now()
            with self._store_call("record vote"):
                outcome = await self.bot_repository.atomic_vote(
                    bot_id, user_id, now, self.cooldown_rule.window
                )

            if outcome is None:
                logfire.warn("Vote on non-existent bot", bot_id=str(bot_id))
                raise NotFoundError("Bot", str(bot_id))

            if not outcome.accepted:
                logfire.info(
                    "Vote blocked by cooldown",
                    bot_id=str(bot_id),
                    user_id=user_id,
                    next_eligible_at=outcome.next_eligible_at,
                )
                raise CooldownActiveError(
                    str(bot_id), user_id, outcome.next_eligible_at
                )

            logfire.info(
                "Vote accepted",
                bot_id=str(bot_id),
                user_id=user_id,
                votes=outcome.bot.votes.current,
            )
            return outcome.bot

    async def reset_votes(self, actor: Actor) -> None:
        """Zero every bot's vote counter and clear all voter timestamps.

        Args:
            actor: Verified caller

        Raises:
            ForbiddenError: Unless the actor has the owner role
        """
        with logfire.span("bot_service.reset_votes", actor_id=actor.user_id):
            if not self.permission_policy.can_reset_all(actor.role):
                logfire.warn("Vote reset forbidden", actor_id=actor.user_id)
                raise ForbiddenError("reset votes of", "all bots", actor.user_id)

            with self._store_call("reset votes"):
                await self.bot_repository.reset_all_votes()
            logfire.info("All votes reset", actor_id=actor.user_id)
