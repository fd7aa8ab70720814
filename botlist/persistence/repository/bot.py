"""PostgreSQL implementation of Bot repository."""

from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Iterator, List, Optional

import logfire
from sqlalchemy import asc, delete, desc, func, insert, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from botlist.domain.error import StoreError
from botlist.domain.model import Bot, VoteOutcome
from botlist.domain.repository.bot import BotRepository
from botlist.domain.value import BotId, BotSortOrder, ListingQuery, UserId
from botlist.persistence.mappers import bot_details_to_dict, bot_to_dict, row_to_bot
from botlist.persistence.tables import bot_voters_table, bots_table


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Wrap SQLAlchemy failures in StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Database error", operation=operation, error=str(e))
        raise StoreError(f"{operation} failed: {e}") from e


class PostgresBotRepository(BotRepository):
    """PostgreSQL implementation of BotRepository.

    Voters are stored one row per (bot, user) in ``bot_voters``; only
    ``find_by_id`` and vote results load them, listings leave them empty.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_voters(self, bot_id: BotId) -> dict[UserId, datetime]:
        """Fetch the latest vote timestamp of every voter of a bot."""
        stmt = select(bot_voters_table.c.user_id, bot_voters_table.c.voted_at).where(
            bot_voters_table.c.bot_id == bot_id
        )
        result = await self.session.execute(stmt)
        return {UserId(row.user_id): row.voted_at for row in result.fetchall()}

    async def find_by_id(self, bot_id: BotId) -> Optional[Bot]:
        """Find a bot by ID."""
        with logfire.span("bot_repository.find_by_id", bot_id=str(bot_id)):
            with _store_errors("find_by_id"):
                stmt = select(bots_table).where(bots_table.c.id == bot_id)
                result = await self.session.execute(stmt)
                row = result.fetchone()

                if not row:
                    return None

                voters = await self._fetch_voters(bot_id)
                return row_to_bot(row._asdict(), voters=voters)

    async def search(self, query: ListingQuery) -> List[Bot]:
        """Find one page of bots matching a listing query."""
        with logfire.span(
            "bot_repository.search",
            search=query.search,
            sort=query.sort.value,
            page=query.page,
            page_size=query.page_size,
        ):
            stmt = select(bots_table)

            # Case-insensitive substring on name and descriptions
            if query.search:
                stmt = stmt.where(
                    or_(
                        bots_table.c.name.icontains(query.search, autoescape=True),
                        bots_table.c.short_description.icontains(
                            query.search, autoescape=True
                        ),
                        bots_table.c.long_description.icontains(
                            query.search, autoescape=True
                        ),
                    )
                )

            # Non-empty intersection with the requested tags
            if query.tags:
                stmt = stmt.where(
                    bots_table.c.tags.overlap([tag.value for tag in query.tags])
                )

            # Sort order, ties broken deterministically
            if query.sort == BotSortOrder.MOST_VOTED:
                stmt = stmt.order_by(
                    desc(bots_table.c.votes),
                    desc(bots_table.c.created_at),
                    asc(bots_table.c.id),
                )
            else:
                stmt = stmt.order_by(desc(bots_table.c.created_at), asc(bots_table.c.id))

            # Pagination
            stmt = stmt.limit(query.page_size).offset(query.offset)

            with _store_errors("search"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()

            bots = [row_to_bot(row._asdict()) for row in rows]
            logfire.info("Found bots", count=len(bots))
            return bots

    async def count(self) -> int:
        """Count all bots."""
        with _store_errors("count"):
            stmt = select(func.count()).select_from(bots_table)
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def insert(self, bot: Bot) -> Bot:
        """Insert a new bot."""
        with logfire.span("bot_repository.insert", bot_id=str(bot.id), name=bot.name):
            with _store_errors("insert"):
                await self.session.execute(insert(bots_table).values(**bot_to_dict(bot)))
                await self.session.flush()
            return bot

    async def replace(self, bot: Bot) -> Optional[Bot]:
        """Replace descriptive fields, keeping stored votes and voters."""
        with logfire.span("bot_repository.replace", bot_id=str(bot.id)):
            with _store_errors("replace"):
                stmt = (
                    update(bots_table)
                    .where(bots_table.c.id == bot.id)
                    .values(**bot_details_to_dict(bot))
                    .returning(bots_table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()

                if row is None:
                    logfire.warn("Bot not found for replace", bot_id=str(bot.id))
                    return None

                voters = await self._fetch_voters(bot.id)
                await self.session.flush()
                return row_to_bot(row._asdict(), voters=voters)

    async def delete(self, bot_id: BotId) -> bool:
        """Delete a bot (voters cascade)."""
        with logfire.span("bot_repository.delete", bot_id=str(bot_id)):
            with _store_errors("delete"):
                stmt = (
                    delete(bots_table)
                    .where(bots_table.c.id == bot_id)
                    .returning(bots_table.c.id)
                )
                result = await self.session.execute(stmt)
                deleted = result.fetchone() is not None
                await self.session.flush()
                return deleted

    async def atomic_vote(
        self,
        bot_id: BotId,
        user_id: UserId,
        now: datetime,
        cooldown_window: timedelta,
    ) -> Optional[VoteOutcome]:
        """Check the cooldown and record a vote in one transaction.

        The conditional upsert on bot_voters takes the (bot, user) row lock;
        a concurrent vote from the same user waits for it and then fails the
        WHERE clause, so only one of them increments the counter.
        """
        with logfire.span(
            "bot_repository.atomic_vote", bot_id=str(bot_id), user_id=user_id
        ):
            with _store_errors("atomic_vote"):
                exists = await self.session.execute(
                    select(bots_table.c.id).where(bots_table.c.id == bot_id)
                )
                if exists.scalar() is None:
                    return None

                upsert = pg_insert(bot_voters_table).values(
                    bot_id=bot_id, user_id=user_id, voted_at=now
                )
                upsert = upsert.on_conflict_do_update(
                    index_elements=[
                        bot_voters_table.c.bot_id,
                        bot_voters_table.c.user_id,
                    ],
                    set_={"voted_at": upsert.excluded.voted_at},
                    where=bot_voters_table.c.voted_at <= now - cooldown_window,
                ).returning(bot_voters_table.c.voted_at)
                accepted = (await self.session.execute(upsert)).fetchone() is not None

                if not accepted:
                    last = await self.session.execute(
                        select(bot_voters_table.c.voted_at).where(
                            bot_voters_table.c.bot_id == bot_id,
                            bot_voters_table.c.user_id == user_id,
                        )
                    )
                    last_vote_at = last.scalar_one()
                    bot = await self.find_by_id(bot_id)
                    if bot is None:
                        return None
                    return VoteOutcome(
                        bot=bot,
                        accepted=False,
                        next_eligible_at=last_vote_at + cooldown_window,
                    )

                stmt = (
                    update(bots_table)
                    .where(bots_table.c.id == bot_id)
                    .values(votes=bots_table.c.votes + 1)
                    .returning(bots_table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()
                voters = await self._fetch_voters(bot_id)
                await self.session.flush()

                logfire.info("Vote recorded", bot_id=str(bot_id), votes=row.votes)
                return VoteOutcome(
                    bot=row_to_bot(row._asdict(), voters=voters), accepted=True
                )

    async def reset_all_votes(self) -> None:
        """Zero every counter and clear all voters."""
        with logfire.span("bot_repository.reset_all_votes"):
            with _store_errors("reset_all_votes"):
                await self.session.execute(delete(bot_voters_table))
                await self.session.execute(update(bots_table).values(votes=0))
                await self.session.flush()
