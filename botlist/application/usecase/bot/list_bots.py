"""List bots use case."""

import logfire
from pydantic import BaseModel, Field

from botlist.domain.service import BotService
from botlist.domain.value import BotSortOrder, BotTag

from .common import BotResponse


class ListBotsRequest(BaseModel):
    """List bots request.

    ``page`` is not bounded here; pages below 1 are read as page 1.
    """

    search: str = ""
    sort: BotSortOrder = BotSortOrder.RECENT
    page: int = 1
    page_size: int | None = Field(default=None, ge=1, le=100)
    tags: list[BotTag] | None = None


class ListBotsResponse(BaseModel):
    """List bots response."""

    bots: list[BotResponse]
    page: int
    count: int


class ListBotsUseCase:
    """Use case for listing bots with search, tag filter and pagination."""

    def __init__(self, bot_service: BotService) -> None:
        """Initialize list bots use case.

        Args:
            bot_service: Bot domain service
        """
        self.bot_service = bot_service

    async def execute(self, request: ListBotsRequest) -> ListBotsResponse:
        """Execute list bots flow.

        Args:
            request: List bots request with filters and pagination

        Returns:
            One page of bots, empty when past the last page
        """
        with logfire.span(
            "list_bots.execute",
            search=request.search,
            sort=request.sort.value,
            page=request.page,
        ):
            bots = await self.bot_service.list_bots(
                search=request.search,
                sort=request.sort,
                page=request.page,
                page_size=request.page_size,
                tags=request.tags,
            )

            return ListBotsResponse(
                bots=[BotResponse.from_bot(bot) for bot in bots],
                page=max(request.page, 1),
                count=len(bots),
            )


class TopBotsUseCase:
    """Use case for the canned "top" listing."""

    def __init__(self, bot_service: BotService) -> None:
        """Initialize top bots use case.

        Args:
            bot_service: Bot domain service
        """
        self.bot_service = bot_service

    async def execute(self) -> list[BotResponse]:
        """Execute top bots flow.

        Returns:
            Most voted bots
        """
        bots = await self.bot_service.top()
        return [BotResponse.from_bot(bot) for bot in bots]
