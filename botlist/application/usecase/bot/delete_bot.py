"""Delete bot use case."""

from uuid import UUID

from pydantic import BaseModel

from botlist.domain.service import BotService
from botlist.domain.value import Actor, BotId


class DeleteBotRequest(BaseModel):
    """Delete bot request."""

    bot_id: str  # UUID string
    actor: Actor  # Verified by the auth guard


class DeleteBotResponse(BaseModel):
    """Delete bot response."""

    deleted: bool


class DeleteBotUseCase:
    """Use case for removing a bot from the directory."""

    def __init__(self, bot_service: BotService) -> None:
        """Initialize delete bot use case.

        Args:
            bot_service: Bot domain service
        """
        self.bot_service = bot_service

    async def execute(self, request: DeleteBotRequest) -> DeleteBotResponse:
        """Execute delete flow.

        A malformed or unknown ID reports ``deleted=False``.

        Raises:
            ForbiddenError: If the actor is neither owner nor admin
        """
        try:
            bot_id = BotId(UUID(request.bot_id))
        except ValueError:
            return DeleteBotResponse(deleted=False)

        deleted = await self.bot_service.delete(bot_id, request.actor)
        return DeleteBotResponse(deleted=deleted)
