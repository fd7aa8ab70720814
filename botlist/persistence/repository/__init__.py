"""PostgreSQL repository implementations."""

from botlist.persistence.repository.bot import PostgresBotRepository

__all__ = [
    "PostgresBotRepository",
]
