"""Unit tests for ResetVotesUseCase."""

import pytest

from botlist.application.usecase.bot import UpsertBotRequest, UpsertBotUseCase
from botlist.application.usecase.vote import (
    ResetVotesRequest,
    ResetVotesUseCase,
    VoteBotRequest,
    VoteBotUseCase,
)
from botlist.domain.error import CooldownActiveError, ForbiddenError
from botlist.domain.value import Actor, Role, UserId
from tests.conftest import make_details
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestResetVotesUseCase:
    """Tests for ResetVotesUseCase."""

    @pytest.mark.asyncio
    async def test_owner_reset_zeroes_votes(self, unit_env):
        # Arrange
        upsert = await unit_env.get(UpsertBotUseCase)
        vote = await unit_env.get(VoteBotUseCase)
        use_case = await unit_env.get(ResetVotesUseCase)

        bot = await upsert.execute(
            UpsertBotRequest(
                details=make_details(), actor=Actor(user_id=UserId("dev-1"))
            )
        )
        await vote.execute(VoteBotRequest(bot_id=bot.bot_id, user_id="voter-1"))

        # Act
        response = await use_case.execute(
            ResetVotesRequest(actor=Actor(user_id=UserId("root"), role=Role.OWNER))
        )

        # Assert
        assert response.success is True
        again = await vote.execute(VoteBotRequest(bot_id=bot.bot_id, user_id="voter-1"))
        assert again.bot.votes == 1

    @pytest.mark.asyncio
    async def test_admin_reset_is_forbidden(self, unit_env):
        # Arrange
        upsert = await unit_env.get(UpsertBotUseCase)
        vote = await unit_env.get(VoteBotUseCase)
        use_case = await unit_env.get(ResetVotesUseCase)

        bot = await upsert.execute(
            UpsertBotRequest(
                details=make_details(), actor=Actor(user_id=UserId("dev-1"))
            )
        )
        await vote.execute(VoteBotRequest(bot_id=bot.bot_id, user_id="voter-1"))

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                ResetVotesRequest(actor=Actor(user_id=UserId("mod"), role=Role.ADMIN))
            )

        # Cooldown still active, so nothing was cleared
        with pytest.raises(CooldownActiveError):
            await vote.execute(VoteBotRequest(bot_id=bot.bot_id, user_id="voter-1"))
