"""Mock clock providers for testing."""

from dishka import Scope, provide

from botlist.adapter.clock import ManualClock
from botlist.domain.service import Clock
from botlist.util.di.infrastructure.clock import ClockProvider


class MockClockProvider(ClockProvider):
    """Mock clock provider using a manually advanced clock.

    REQUEST scope gives each test its own clock starting at the same instant.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_clock(self) -> Clock:
        """Provide manual clock."""
        return ManualClock()
