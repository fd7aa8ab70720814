"""Repository interfaces for the bot directory domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from botlist.domain.repository.bot import BotRepository

__all__ = [
    "BotRepository",
]
