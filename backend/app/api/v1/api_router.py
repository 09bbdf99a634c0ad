from fastapi import APIRouter

from .endpoints import player

# This router is included with the API_V1_STR prefix by main.py,
# so paths here are relative to that.
api_router = APIRouter()

# All routes defined in 'player.router' are prefixed with '/players'
api_router.include_router(player.router, prefix="/players", tags=["Players"])
