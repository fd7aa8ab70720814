"""Application layer DI providers."""

from dishka import Scope, provide

from botlist.application.usecase.bot import (
    CountBotsUseCase,
    DeleteBotUseCase,
    ListBotsUseCase,
    ShowBotUseCase,
    TopBotsUseCase,
    UpsertBotUseCase,
)
from botlist.application.usecase.vote import ResetVotesUseCase, VoteBotUseCase
from botlist.config import VoteSettings
from botlist.domain.service import BotService
from botlist.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Bot use cases
    @provide(scope=Scope.REQUEST)
    def get_show_bot_use_case(self, bot_service: BotService) -> ShowBotUseCase:
        """Provide show bot use case."""
        return ShowBotUseCase(bot_service=bot_service)

    @provide(scope=Scope.REQUEST)
    def get_list_bots_use_case(self, bot_service: BotService) -> ListBotsUseCase:
        """Provide list bots use case."""
        return ListBotsUseCase(bot_service=bot_service)

    @provide(scope=Scope.REQUEST)
    def get_top_bots_use_case(self, bot_service: BotService) -> TopBotsUseCase:
        """Provide top bots use case."""
        return TopBotsUseCase(bot_service=bot_service)

    @provide(scope=Scope.REQUEST)
    def get_count_bots_use_case(self, bot_service: BotService) -> CountBotsUseCase:
        """Provide count bots use case."""
        return CountBotsUseCase(bot_service=bot_service)

    @provide(scope=Scope.REQUEST)
    def get_upsert_bot_use_case(self, bot_service: BotService) -> UpsertBotUseCase:
        """Provide upsert bot use case."""
        return UpsertBotUseCase(bot_service=bot_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_bot_use_case(self, bot_service: BotService) -> DeleteBotUseCase:
        """Provide delete bot use case."""
        return DeleteBotUseCase(bot_service=bot_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_bot_use_case(
        self, bot_service: BotService, vote_settings: VoteSettings
    ) -> VoteBotUseCase:
        """Provide vote use case."""
        return VoteBotUseCase(bot_service=bot_service, vote_settings=vote_settings)

    @provide(scope=Scope.REQUEST)
    def get_reset_votes_use_case(self, bot_service: BotService) -> ResetVotesUseCase:
        """Provide reset votes use case."""
        return ResetVotesUseCase(bot_service=bot_service)
