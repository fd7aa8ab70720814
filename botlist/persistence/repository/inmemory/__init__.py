"""In-memory repository implementations for testing."""

from .bot import InMemoryBotRepository

__all__ = [
    "InMemoryBotRepository",
]
