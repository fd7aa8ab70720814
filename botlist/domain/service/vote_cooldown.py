"""Vote cooldown rule."""

from datetime import datetime, timedelta
from typing import Optional

from botlist.domain.value import CooldownDecision

from .base import Service


class VoteCooldownRule(Service):
    """Per (bot, user) cooldown between two accepted votes."""

    def __init__(self, window: timedelta) -> None:
        """Initialize cooldown rule.

        Args:
            window: Minimum time between two votes of the same user
        """
        if window <= timedelta(0):
            raise ValueError("Cooldown window must be positive")
        self.window = window

    def evaluate(
        self, last_vote_at: Optional[datetime], now: datetime
    ) -> CooldownDecision:
        """Decide whether a vote is allowed now.

        A user who never voted is always allowed. Once ``last_vote_at +
        window`` is reached the vote is allowed again; before that it is
        blocked and the decision carries the next eligible instant.

        Args:
            last_vote_at: The user's latest accepted vote, if any
            now: Current time

        Returns:
            Cooldown decision
        """
        if last_vote_at is None:
            return CooldownDecision(allowed=True)

        next_eligible_at = last_vote_at + self.window
        if now >= next_eligible_at:
            return CooldownDecision(allowed=True)

        return CooldownDecision(allowed=False, next_eligible_at=next_eligible_at)
