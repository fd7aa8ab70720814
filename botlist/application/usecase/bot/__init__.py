"""Bot use cases."""

from .common import BotResponse
from .count_bots import CountBotsResponse, CountBotsUseCase
from .delete_bot import DeleteBotRequest, DeleteBotResponse, DeleteBotUseCase
from .list_bots import (
    ListBotsRequest,
    ListBotsResponse,
    ListBotsUseCase,
    TopBotsUseCase,
)
from .show_bot import ShowBotRequest, ShowBotUseCase
from .upsert_bot import UpsertBotRequest, UpsertBotUseCase

__all__ = [
    "BotResponse",
    "CountBotsResponse",
    "CountBotsUseCase",
    "DeleteBotRequest",
    "DeleteBotResponse",
    "DeleteBotUseCase",
    "ListBotsRequest",
    "ListBotsResponse",
    "ListBotsUseCase",
    "ShowBotRequest",
    "ShowBotUseCase",
    "TopBotsUseCase",
    "UpsertBotRequest",
    "UpsertBotUseCase",
]
