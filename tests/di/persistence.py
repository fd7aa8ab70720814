"""Mock persistence providers for testing."""

from dishka import Scope, provide

from botlist.domain.repository import BotRepository
from botlist.persistence.repository.inmemory import InMemoryBotRepository
from botlist.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_bot_repository(self) -> BotRepository:
        """Provide in-memory bot repository."""
        return InMemoryBotRepository()
