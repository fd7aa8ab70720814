"""Count bots use case."""

from pydantic import BaseModel

from botlist.domain.service import BotService


class CountBotsResponse(BaseModel):
    """Count bots response."""

    bots_count: int


class CountBotsUseCase:
    """Use case for counting directory entries."""

    def __init__(self, bot_service: BotService) -> None:
        self.bot_service = bot_service

    async def execute(self) -> CountBotsResponse:
        return CountBotsResponse(bots_count=await self.bot_service.count())
