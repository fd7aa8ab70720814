"""Unit tests for InMemoryBotRepository."""

from datetime import timedelta
from uuid import uuid4

import pytest

from botlist.domain.value import BotId, BotSortOrder, ListingQuery, UserId
from botlist.persistence.repository.inmemory import InMemoryBotRepository
from tests.conftest import T0, make_bot

WINDOW = timedelta(hours=8)


class TestInMemoryBotRepository:
    """Unit tests for the in-memory store."""

    @pytest.mark.asyncio
    async def test_replace_keeps_stored_votes(self):
        """Votes recorded after a bot was read survive a replace."""
        # Arrange
        repo = InMemoryBotRepository()
        bot = await repo.insert(make_bot("Before"))
        stale = await repo.find_by_id(bot.id)
        await repo.atomic_vote(bot.id, UserId("voter-1"), T0, WINDOW)

        # Act
        replaced = await repo.replace(stale.model_copy(update={"name": "After"}))

        # Assert
        assert replaced.name == "After"
        assert replaced.votes.current == 1
        assert UserId("voter-1") in replaced.voters

    @pytest.mark.asyncio
    async def test_replace_missing_bot_returns_none(self):
        repo = InMemoryBotRepository()

        assert await repo.replace(make_bot()) is None

    @pytest.mark.asyncio
    async def test_delete_reports_whether_bot_existed(self):
        repo = InMemoryBotRepository()
        bot = await repo.insert(make_bot())

        assert await repo.delete(bot.id) is True
        assert await repo.delete(bot.id) is False

    @pytest.mark.asyncio
    async def test_atomic_vote_on_missing_bot_returns_none(self):
        repo = InMemoryBotRepository()

        assert await repo.atomic_vote(BotId(uuid4()), UserId("u"), T0, WINDOW) is None

    @pytest.mark.asyncio
    async def test_atomic_vote_blocked_inside_window(self):
        # Arrange
        repo = InMemoryBotRepository()
        bot = await repo.insert(make_bot())
        user = UserId("voter-1")
        await repo.atomic_vote(bot.id, user, T0, WINDOW)

        # Act
        outcome = await repo.atomic_vote(bot.id, user, T0 + timedelta(hours=1), WINDOW)

        # Assert
        assert not outcome.accepted
        assert outcome.next_eligible_at == T0 + WINDOW
        assert outcome.bot.votes.current == 1

    @pytest.mark.asyncio
    async def test_search_paginates_recent_first(self):
        # Arrange
        repo = InMemoryBotRepository()
        for i in range(5):
            await repo.insert(make_bot(f"Bot {i}", created_at=T0 + timedelta(hours=i)))

        # Act
        page = await repo.search(
            ListingQuery(sort=BotSortOrder.RECENT, page=1, page_size=3)
        )
        beyond = await repo.search(ListingQuery(page=100, page_size=18))

        # Assert
        assert [b.name for b in page] == ["Bot 4", "Bot 3", "Bot 2"]
        assert beyond == []

    @pytest.mark.asyncio
    async def test_reset_all_votes(self):
        repo = InMemoryBotRepository()
        bot = await repo.insert(make_bot(votes=4))
        await repo.atomic_vote(bot.id, UserId("voter-1"), T0, WINDOW)

        await repo.reset_all_votes()

        stored = await repo.find_by_id(bot.id)
        assert stored.votes.current == 0
        assert stored.voters == {}
