# backend/app/services/player_service.py
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app import crud, models, schemas
from app.core.exceptions import InvalidArgument, NotFound, ValidationError
from app.core.time_utils import epoch_millis_to_datetime
from app.game_logic.leveling import progression_for
from app.models.player import MAX_ID, NAME_MAX_LENGTH, TITLE_MAX_LENGTH
from app.services.player_filter import PlayerFilter

logger = logging.getLogger(__name__)

MIN_BIRTHDAY_YEAR = 2000
MAX_BIRTHDAY_YEAR = 3000
MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000


# --- Field checks ---
# Each check raises ValidationError or returns the value in its stored form.

def _check_text(field: str, value: Optional[str], max_length: int) -> str:
    if value is None:
        raise ValidationError(field, f"'{field}' is required")
    if not value:
        raise ValidationError(field, f"'{field}' must not be empty", value)
    if len(value) > max_length:
        raise ValidationError(field, f"'{field}' must be at most {max_length} characters", value)
    return value


def check_name(name: Optional[str]) -> str:
    return _check_text("name", name, NAME_MAX_LENGTH)


def check_title(title: Optional[str]) -> str:
    return _check_text("title", title, TITLE_MAX_LENGTH)


def check_birthday(birthday: Optional[int]) -> datetime:
    if birthday is None:
        raise ValidationError("birthday", "'birthday' is required")
    try:
        value = epoch_millis_to_datetime(birthday)
    except OverflowError:
        raise ValidationError("birthday", "'birthday' is not a representable timestamp", birthday)
    if not MIN_BIRTHDAY_YEAR <= value.year <= MAX_BIRTHDAY_YEAR:
        raise ValidationError(
            "birthday",
            f"'birthday' year must be between {MIN_BIRTHDAY_YEAR} and {MAX_BIRTHDAY_YEAR}",
            birthday,
        )
    return value


def check_experience(experience: Optional[int]) -> int:
    if experience is None:
        raise ValidationError("experience", "'experience' is required")
    if not MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE:
        raise ValidationError(
            "experience",
            f"'experience' must be between {MIN_EXPERIENCE} and {MAX_EXPERIENCE}",
            experience,
        )
    return experience


def _check_required(field: str, value: Any) -> Any:
    if value is None:
        raise ValidationError(field, f"'{field}' is required")
    return value


def check_id(db: Session, player_id: int) -> None:
    if player_id <= 0:
        raise InvalidArgument(f"Player id must be positive, got {player_id}", {"id": player_id})
    if player_id > MAX_ID or not crud.crud_player.exists_by_id(db, player_id):
        raise NotFound(f"Player with id {player_id} not found", {"id": player_id})


def _apply_progression(player: models.Player) -> None:
    player.level, player.until_next_level = progression_for(player.experience)


# --- Lifecycle operations ---

def get_all(
    db: Session, player_filter: PlayerFilter, page_request: schemas.PageRequest
) -> schemas.PlayerPage:
    return crud.crud_player.find_all(db, player_filter.criteria(), page_request)


def count(db: Session, player_filter: PlayerFilter) -> int:
    return crud.crud_player.count(db, player_filter.criteria())


def create(db: Session, player_in: schemas.PlayerCreate) -> models.Player:
    """
    Validates every field, computes level and untilNextLevel, and stores the
    new player. `banned` defaults to False.
    """
    player = models.Player(
        name=check_name(player_in.name),
        title=check_title(player_in.title),
        race=_check_required("race", player_in.race),
        profession=_check_required("profession", player_in.profession),
        birthday=check_birthday(player_in.birthday),
        banned=bool(player_in.banned),
        experience=check_experience(player_in.experience),
    )
    _apply_progression(player)

    saved = crud.crud_player.save(db, player)
    logger.info(f"Created player {saved.id} ('{saved.name}', level {saved.level}).")
    return saved


def get_by_id(db: Session, player_id: int) -> models.Player:
    check_id(db, player_id)
    player = crud.crud_player.find_by_id(db, player_id)
    if player is None:
        # Removed between the existence check and the read.
        raise NotFound(f"Player with id {player_id} not found", {"id": player_id})
    return player


def update(db: Session, player_id: int, player_in: schemas.PlayerUpdate) -> models.Player:
    """
    Partially updates a player. Every non-null field in `player_in` is
    validated before anything is written, so a rejected update leaves the
    stored player untouched. When experience changes, level and
    untilNextLevel are recomputed from the merged player.
    """
    player_to_edit = get_by_id(db, player_id)

    changes: Dict[str, Any] = {}
    if player_in.name is not None:
        changes["name"] = check_name(player_in.name)
    if player_in.title is not None:
        changes["title"] = check_title(player_in.title)
    if player_in.race is not None:
        changes["race"] = player_in.race
    if player_in.profession is not None:
        changes["profession"] = player_in.profession
    if player_in.birthday is not None:
        changes["birthday"] = check_birthday(player_in.birthday)
    if player_in.banned is not None:
        changes["banned"] = player_in.banned
    if player_in.experience is not None:
        changes["experience"] = check_experience(player_in.experience)

    for field, value in changes.items():
        setattr(player_to_edit, field, value)
    if "experience" in changes:
        _apply_progression(player_to_edit)

    saved = crud.crud_player.save(db, player_to_edit)
    logger.info(f"Updated player {player_id}; fields changed: {sorted(changes)}")
    return saved


def delete(db: Session, player_id: int) -> None:
    check_id(db, player_id)
    crud.crud_player.delete_by_id(db, player_id)
    logger.info(f"Deleted player {player_id}.")
