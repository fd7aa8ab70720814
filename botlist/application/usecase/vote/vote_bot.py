"""Vote for bot use case."""

from datetime import datetime

from pydantic import BaseModel

from botlist.application.usecase.bot.common import BotResponse, parse_bot_id
from botlist.config import VoteSettings
from botlist.domain.service import BotService
from botlist.domain.value import UserId


class VoteBotRequest(BaseModel):
    """Vote request."""

    bot_id: str  # UUID string
    user_id: str  # User ID from the auth guard


class VoteBotResponse(BaseModel):
    """Vote response."""

    bot: BotResponse
    voted_at: datetime
    next_vote_at: datetime


class VoteBotUseCase:
    """Use case for voting for a bot."""

    def __init__(self, bot_service: BotService, vote_settings: VoteSettings) -> None:
        """Initialize vote use case.

        Args:
            bot_service: Bot domain service
            vote_settings: Vote cooldown settings
        """
        self.bot_service = bot_service
        self.vote_settings = vote_settings

    async def execute(self, request: VoteBotRequest) -> VoteBotResponse:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            Updated bot with the time of this vote and of the next allowed one

        Raises:
            NotFoundError: If bot not found
            CooldownActiveError: If the user voted too recently; carries
                ``next_eligible_at``
        """
        user_id = UserId(request.user_id)
        bot = await self.bot_service.vote(parse_bot_id(request.bot_id), user_id)

        voted_at = bot.voters[user_id]
        return VoteBotResponse(
            bot=BotResponse.from_bot(bot),
            voted_at=voted_at,
            next_vote_at=voted_at + self.vote_settings.cooldown_window,
        )
