"""Domain layer DI providers."""

from dishka import Scope, provide

from botlist.config import ListingSettings, VoteSettings
from botlist.domain.repository import BotRepository
from botlist.domain.service import (
    BotService,
    Clock,
    PermissionPolicy,
    RankingEngine,
    VoteCooldownRule,
)
from botlist.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Pure rules are APP-scoped. BotService is REQUEST-scoped to align with
    the repository/session lifecycle.
    """

    @provide(scope=Scope.APP)
    def get_permission_policy(self) -> PermissionPolicy:
        """Provide mutation permission policy."""
        return PermissionPolicy()

    @provide(scope=Scope.APP)
    def get_vote_cooldown_rule(self, vote_settings: VoteSettings) -> VoteCooldownRule:
        """Provide vote cooldown rule."""
        return VoteCooldownRule(window=vote_settings.cooldown_window)

    @provide(scope=Scope.APP)
    def get_ranking_engine(self, listing_settings: ListingSettings) -> RankingEngine:
        """Provide ranking engine."""
        return RankingEngine(
            default_page_size=listing_settings.page_size,
            top_size=listing_settings.top_size,
            max_page_size=listing_settings.max_page_size,
        )

    @provide(scope=Scope.REQUEST)
    def get_bot_service(
        self,
        bot_repository: BotRepository,
        clock: Clock,
        cooldown_rule: VoteCooldownRule,
        permission_policy: PermissionPolicy,
        ranking_engine: RankingEngine,
    ) -> BotService:
        """Provide bot domain service."""
        return BotService(
            bot_repository=bot_repository,
            clock=clock,
            cooldown_rule=cooldown_rule,
            permission_policy=permission_policy,
            ranking_engine=ranking_engine,
        )
