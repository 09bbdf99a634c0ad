# backend/app/api/v1/endpoints/player.py
from typing import Any
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from app import schemas
from app.api.dependencies import get_page_request, get_player_filter
from app.db.session import get_db
from app.models.player import MAX_ID
from app.services import player_service
from app.services.player_filter import PlayerFilter

router = APIRouter()


@router.get("", response_model=schemas.PlayerPage)
def read_players(
    db: Session = Depends(get_db),
    player_filter: PlayerFilter = Depends(get_player_filter),
    page_request: schemas.PageRequest = Depends(get_page_request),
) -> Any:
    """
    Retrieve one page of players matching every supplied filter.
    """
    return player_service.get_all(db, player_filter, page_request)


@router.get("/count", response_model=int)
def count_players(
    db: Session = Depends(get_db),
    player_filter: PlayerFilter = Depends(get_player_filter),
) -> Any:
    """
    Count the players matching every supplied filter (no paging).
    """
    return player_service.count(db, player_filter)


@router.post("", response_model=schemas.Player, status_code=status.HTTP_201_CREATED)
def create_player(
    *,
    db: Session = Depends(get_db),
    player_in: schemas.PlayerCreate,
) -> Any:
    return player_service.create(db, player_in)


@router.get("/{player_id}", response_model=schemas.Player)
def read_player(player_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)) -> Any:
    return player_service.get_by_id(db, player_id)


@router.post("/{player_id}", response_model=schemas.Player)
def update_player(
    *,
    player_id: int = Path(..., le=MAX_ID),
    player_in: schemas.PlayerUpdate,
    db: Session = Depends(get_db),
) -> Any:
    """
    Partially update a player. Fields left out (or null) keep their stored values.
    """
    return player_service.update(db, player_id, player_in)


@router.delete("/{player_id}", status_code=status.HTTP_200_OK)
def delete_player(player_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)) -> Response:
    player_service.delete(db, player_id)
    return Response(status_code=status.HTTP_200_OK)
