# File: backend/app/crud/__init__.py

from . import crud_player

__all__ = [
    "crud_player",
]
