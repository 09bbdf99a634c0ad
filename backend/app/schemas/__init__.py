# File: backend/app/schemas/__init__.py

from .page import PageRequest, PlayerOrder, PlayerPage
from .player import Player, PlayerCreate, PlayerPayload, PlayerUpdate

__all__ = [
    "PageRequest",
    "Player",
    "PlayerCreate",
    "PlayerOrder",
    "PlayerPage",
    "PlayerPayload",
    "PlayerUpdate",
]
