"""Upsert bot use case."""

from pydantic import BaseModel

from botlist.domain.model import BotDetails
from botlist.domain.service import BotService
from botlist.domain.value import Actor

from .common import BotResponse, parse_bot_id


class UpsertBotRequest(BaseModel):
    """Create or update bot request."""

    bot_id: str | None = None  # None creates a new bot
    details: BotDetails
    actor: Actor  # Verified by the auth guard


class UpsertBotUseCase:
    """Use case for submitting a new bot or editing an existing one."""

    def __init__(self, bot_service: BotService) -> None:
        """Initialize upsert bot use case.

        Args:
            bot_service: Bot domain service
        """
        self.bot_service = bot_service

    async def execute(self, request: UpsertBotRequest) -> BotResponse:
        """Execute upsert flow.

        Args:
            request: Upsert request

        Returns:
            Created or updated bot

        Raises:
            NotFoundError: If updating a bot that does not exist
            ForbiddenError: If the actor is neither owner nor admin
            InternalError: If the store rejects the write
        """
        bot_id = parse_bot_id(request.bot_id) if request.bot_id else None
        bot = await self.bot_service.upsert(request.details, request.actor, bot_id)
        return BotResponse.from_bot(bot)
