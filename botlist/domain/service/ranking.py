"""Ranking engine for bot listings."""

from typing import Iterable, Optional, Sequence

from botlist.domain.model import Bot
from botlist.domain.value import BotSortOrder, BotTag, ListingQuery

from .base import Service


class RankingEngine(Service):
    """Filters, orders and paginates bots for listing queries.

    Orderings:
    - recent: created_at DESC, id ASC
    - most_voted: votes DESC, created_at DESC, id ASC

    The in-memory store applies ``select`` directly; SQL stores express
    the same filter and ordering in their queries.
    """

    def __init__(
        self, default_page_size: int = 18, top_size: int = 6, max_page_size: int = 100
    ) -> None:
        """Initialize ranking engine.

        Args:
            default_page_size: Page size when the caller gives none
            top_size: Number of bots in the "top" shortcut
            max_page_size: Largest page size a caller may request
        """
        self.default_page_size = default_page_size
        self.top_size = top_size
        self.max_page_size = max_page_size

    def query(
        self,
        search: str = "",
        sort: BotSortOrder = BotSortOrder.RECENT,
        page: int = 1,
        page_size: Optional[int] = None,
        tags: Optional[Iterable[BotTag]] = None,
    ) -> ListingQuery:
        """Build a normalised listing query.

        Pages below 1 are clamped to 1, page sizes are capped at
        ``max_page_size`` and repeated tags are collapsed.
        """
        return ListingQuery(
            search=search or "",
            sort=sort,
            page=max(page, 1),
            page_size=min(page_size or self.default_page_size, self.max_page_size),
            tags=tuple(dict.fromkeys(tags or ())),
        )

    def top_query(self) -> ListingQuery:
        """Most voted bots, unfiltered, first page."""
        return self.query(sort=BotSortOrder.MOST_VOTED, page=1, page_size=self.top_size)

    @staticmethod
    def matches(bot: Bot, query: ListingQuery) -> bool:
        """Check whether a bot passes the text and tag filters."""
        if query.search:
            needle = query.search.casefold()
            haystack = (bot.name, bot.short_description, bot.long_description or "")
            if not any(needle in text.casefold() for text in haystack):
                return False

        if query.tags and not set(query.tags) & set(bot.tags):
            return False

        return True

    @staticmethod
    def order(bots: Iterable[Bot], sort: BotSortOrder) -> list[Bot]:
        """Order bots by the requested ranking.

        Uses stable sorts from the least to the most significant key.
        """
        ordered = sorted(bots, key=lambda b: b.id)
        ordered.sort(key=lambda b: b.created_at, reverse=True)
        if sort == BotSortOrder.MOST_VOTED:
            ordered.sort(key=lambda b: b.votes.current, reverse=True)
        return ordered

    @staticmethod
    def paginate(bots: Sequence[Bot], page: int, page_size: int) -> list[Bot]:
        """Slice one 1-indexed page; out-of-range pages are empty."""
        start = (max(page, 1) - 1) * page_size
        return list(bots[start : start + page_size])

    def select(self, bots: Iterable[Bot], query: ListingQuery) -> list[Bot]:
        """Filter, order and paginate in one go."""
        candidates = [b for b in bots if self.matches(b, query)]
        ordered = self.order(candidates, query.sort)
        return self.paginate(ordered, query.page, query.page_size)
