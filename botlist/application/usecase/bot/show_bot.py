"""Show bot use case."""

from pydantic import BaseModel

from botlist.domain.service import BotService

from .common import BotResponse, parse_bot_id


class ShowBotRequest(BaseModel):
    """Show bot request."""

    bot_id: str  # UUID string
    include_owner_detail: bool = False


class ShowBotUseCase:
    """Use case for showing a single bot."""

    def __init__(self, bot_service: BotService) -> None:
        """Initialize show bot use case.

        Args:
            bot_service: Bot domain service
        """
        self.bot_service = bot_service

    async def execute(self, request: ShowBotRequest) -> BotResponse:
        """Execute show bot flow.

        Args:
            request: Show bot request

        Returns:
            Bot details

        Raises:
            NotFoundError: If bot not found
        """
        bot = await self.bot_service.show(
            parse_bot_id(request.bot_id), request.include_owner_detail
        )
        return BotResponse.from_bot(bot, include_voters=request.include_owner_detail)
