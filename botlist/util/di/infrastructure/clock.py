"""Clock infrastructure providers."""

from dishka import Scope, provide

from botlist.adapter.clock import SystemClock
from botlist.domain.service import Clock
from botlist.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock provider using the system clock."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        """Provide UTC system clock."""
        return SystemClock()
