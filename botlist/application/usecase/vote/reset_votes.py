"""Reset votes use case."""

from pydantic import BaseModel

from botlist.domain.service import BotService
from botlist.domain.value import Actor


class ResetVotesRequest(BaseModel):
    """Reset votes request."""

    actor: Actor  # Verified by the auth guard


class ResetVotesResponse(BaseModel):
    """Reset votes response."""

    success: bool
    message: str


class ResetVotesUseCase:
    """Use case for resetting every bot's votes."""

    def __init__(self, bot_service: BotService) -> None:
        """Initialize reset votes use case.

        Args:
            bot_service: Bot domain service
        """
        self.bot_service = bot_service

    async def execute(self, request: ResetVotesRequest) -> ResetVotesResponse:
        """Execute reset flow.

        Raises:
            ForbiddenError: Unless the actor has the owner role
        """
        await self.bot_service.reset_votes(request.actor)
        return ResetVotesResponse(success=True, message="All votes reset")
