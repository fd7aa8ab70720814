"""Domain services."""

from .base import Service
from .bot_service import BotService
from .clock import Clock
from .permission_policy import PermissionPolicy
from .ranking import RankingEngine
from .vote_cooldown import VoteCooldownRule

__all__ = [
    "BotService",
    "Clock",
    "PermissionPolicy",
    "RankingEngine",
    "Service",
    "VoteCooldownRule",
]
