# File: backend/app/models/__init__.py

from .player import Player, Profession, Race

__all__ = [
    "Player",
    "Profession",
    "Race",
]
