"""Unit tests for RankingEngine."""

from datetime import timedelta
from uuid import UUID

from botlist.domain.service import RankingEngine
from botlist.domain.value import BotId, BotSortOrder, BotTag, ListingQuery
from tests.conftest import T0, make_bot


def _bot_id(n: int) -> BotId:
    return BotId(UUID(int=n))


class TestQuery:
    """Tests for query building."""

    def test_defaults(self):
        """No arguments gives the first recent page of the default size."""
        query = RankingEngine().query()

        assert query == ListingQuery(
            search="", sort=BotSortOrder.RECENT, page=1, page_size=18, tags=()
        )

    def test_page_below_one_is_clamped(self):
        assert RankingEngine().query(page=0).page == 1
        assert RankingEngine().query(page=-5).page == 1

    def test_duplicate_tags_are_collapsed(self):
        query = RankingEngine().query(tags=[BotTag.MUSIC, BotTag.FUN, BotTag.MUSIC])

        assert query.tags == (BotTag.MUSIC, BotTag.FUN)

    def test_search_whitespace_is_stripped(self):
        assert RankingEngine().query(search="  music  ").search == "music"

    def test_top_query(self):
        """The top shortcut is the first most-voted page of six."""
        query = RankingEngine().top_query()

        assert query.sort == BotSortOrder.MOST_VOTED
        assert query.page == 1
        assert query.page_size == 6
        assert query.search == ""
        assert query.tags == ()

    def test_page_size_is_capped(self):
        assert RankingEngine(max_page_size=50).query(page_size=500).page_size == 50

    def test_configured_sizes(self):
        engine = RankingEngine(default_page_size=10, top_size=3)

        assert engine.query().page_size == 10
        assert engine.top_query().page_size == 3


class TestOrder:
    """Tests for ordering."""

    def test_recent_orders_by_created_at_desc(self):
        old = make_bot("Old", created_at=T0)
        new = make_bot("New", created_at=T0 + timedelta(hours=1))

        ordered = RankingEngine.order([old, new], BotSortOrder.RECENT)

        assert [b.id for b in ordered] == [new.id, old.id]

    def test_recent_ties_break_by_id_asc(self):
        """Bots created at the same instant are ordered by ascending id."""
        a = make_bot("A", bot_id=_bot_id(1))
        b = make_bot("B", bot_id=_bot_id(2))
        c = make_bot("C", bot_id=_bot_id(3))

        ordered = RankingEngine.order([c, a, b], BotSortOrder.RECENT)

        assert [bot.id for bot in ordered] == [a.id, b.id, c.id]

    def test_most_voted_orders_by_votes_then_recency_then_id(self):
        """votes DESC, created_at DESC, id ASC."""
        # Arrange
        popular = make_bot("Popular", votes=10, created_at=T0)
        tied_new = make_bot(
            "Tied New", votes=5, created_at=T0 + timedelta(days=1), bot_id=_bot_id(9)
        )
        tied_old_low_id = make_bot("Tied Old 1", votes=5, bot_id=_bot_id(1))
        tied_old_high_id = make_bot("Tied Old 2", votes=5, bot_id=_bot_id(2))
        unloved = make_bot("Unloved", votes=0, created_at=T0 + timedelta(days=2))

        # Act
        ordered = RankingEngine.order(
            [unloved, tied_old_high_id, popular, tied_old_low_id, tied_new],
            BotSortOrder.MOST_VOTED,
        )

        # Assert
        assert [b.id for b in ordered] == [
            popular.id,
            tied_new.id,
            tied_old_low_id.id,
            tied_old_high_id.id,
            unloved.id,
        ]

    def test_order_is_deterministic(self):
        """Any input permutation yields the same order."""
        bots = [make_bot(f"Bot {i}", votes=i % 2, bot_id=_bot_id(i)) for i in range(6)]

        forward = RankingEngine.order(bots, BotSortOrder.MOST_VOTED)
        backward = RankingEngine.order(reversed(bots), BotSortOrder.MOST_VOTED)

        assert [b.id for b in forward] == [b.id for b in backward]


class TestMatches:
    """Tests for search and tag filtering."""

    def test_search_is_case_insensitive_on_name(self):
        bot = make_bot("MusicMaster")

        assert RankingEngine.matches(bot, ListingQuery(search="musicmaster"))
        assert not RankingEngine.matches(bot, ListingQuery(search="moderation"))

    def test_search_covers_descriptions(self):
        bot = make_bot(
            "Helper",
            short_description="Plays Lofi radio",
            long_description="Supports playlists",
        )

        assert RankingEngine.matches(bot, ListingQuery(search="LOFI"))
        assert RankingEngine.matches(bot, ListingQuery(search="playlists"))

    def test_tag_filter_uses_intersection(self):
        bot = make_bot("Helper", tags=[BotTag.MUSIC, BotTag.FUN])

        assert RankingEngine.matches(
            bot, ListingQuery(tags=(BotTag.FUN, BotTag.ECONOMY))
        )
        assert not RankingEngine.matches(bot, ListingQuery(tags=(BotTag.ECONOMY,)))


class TestPaginate:
    """Tests for pagination."""

    def test_pages_are_one_indexed(self):
        bots = [make_bot(f"Bot {i}") for i in range(5)]

        assert RankingEngine.paginate(bots, 1, 2) == bots[0:2]
        assert RankingEngine.paginate(bots, 3, 2) == bots[4:5]

    def test_out_of_range_page_is_empty(self):
        """Page 100 of 5 items is empty, not an error."""
        bots = [make_bot(f"Bot {i}") for i in range(5)]

        assert RankingEngine.paginate(bots, 100, 18) == []

    def test_select_filters_orders_and_paginates(self):
        # Arrange
        engine = RankingEngine()
        bots = [
            make_bot(f"Music {i}", tags=[BotTag.MUSIC], votes=i) for i in range(4)
        ] + [make_bot("Mod", tags=[BotTag.MODERATION], votes=100)]
        query = engine.query(
            sort=BotSortOrder.MOST_VOTED, page=1, page_size=2, tags=[BotTag.MUSIC]
        )

        # Act
        page = engine.select(bots, query)

        # Assert
        assert [b.name for b in page] == ["Music 3", "Music 2"]
