"""Vote outcome returned by the store's atomic vote primitive."""

from datetime import datetime
from typing import Optional

from botlist.domain.model.bot import Bot
from botlist.domain.model.common import DomainModel


class VoteOutcome(DomainModel):
    """Result of one atomic vote attempt.

    When ``accepted`` is False the bot is returned unchanged and
    ``next_eligible_at`` tells when the user may vote again.
    """

    bot: Bot
    accepted: bool
    next_eligible_at: Optional[datetime] = None
