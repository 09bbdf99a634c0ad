# backend/app/crud/crud_player.py
import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import func, select, true
from sqlalchemy.orm import Session

from .. import models, schemas
from ..core.time_utils import epoch_millis_to_datetime
from ..game_logic.leveling import progression_for
from .player_criteria import Criterion, to_where_clause

logger = logging.getLogger(__name__)

# Path to the seeds directory (relative to this file)
SEED_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "seeds")


def find_all(
    db: Session, criteria: Iterable[Criterion], page_request: schemas.PageRequest
) -> schemas.PlayerPage:
    """
    Returns one page of players matching every criterion, ordered by the
    requested column (id breaks ties), together with the total match count.
    """
    where_clause = to_where_clause(criteria)
    order_column = getattr(models.Player, page_request.order.attribute)
    stmt = (
        select(models.Player)
        .where(where_clause)
        .order_by(order_column.asc(), models.Player.id.asc())
        .offset(page_request.offset)
        .limit(page_request.page_size)
    )
    rows = db.scalars(stmt).all()
    total = count_matching(db, where_clause)
    return schemas.PlayerPage.build(rows, total, page_request)


def count(db: Session, criteria: Iterable[Criterion]) -> int:
    return count_matching(db, to_where_clause(criteria))


def count_matching(db: Session, where_clause: Any) -> int:
    stmt = select(func.count(models.Player.id)).where(where_clause)
    return db.scalar(stmt) or 0


def count_players(db: Session) -> int:
    """Counts the total number of players in the database."""
    return count_matching(db, true())


def find_by_id(db: Session, player_id: int) -> Optional[models.Player]:
    return db.get(models.Player, player_id)


def exists_by_id(db: Session, player_id: int) -> bool:
    stmt = select(models.Player.id).where(models.Player.id == player_id)
    return db.scalar(stmt) is not None


def save(db: Session, player: models.Player) -> models.Player:
    db.add(player)
    db.commit()
    db.refresh(player)
    return player


def delete_by_id(db: Session, player_id: int) -> None:
    db_player = find_by_id(db, player_id)
    if db_player:
        db.delete(db_player)
        db.commit()


# --- Seeding Initial Players ---
def _load_seed_data(filename: str) -> List[Dict[str, Any]]:
    filepath = os.path.join(SEED_DIR, filename)
    try:
        with open(filepath, "r") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Player seed file not found: {filepath}")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Could not decode JSON from player seed file {filepath}: {e}")
        return []


def seed_initial_players(db: Session, filename: str = "players.json") -> int:
    """
    Inserts the seed roster from players.json, but only into an empty table.
    Derived fields are computed here rather than trusted from the file.
    Returns the number of players inserted.
    """
    if count_players(db) > 0:
        logger.info("Players table is not empty. Skipping player seeding.")
        return 0

    player_definitions = _load_seed_data(filename)
    if not player_definitions:
        logger.warning(f"No player definitions found in {filename}. Aborting player seeding.")
        return 0

    seeded_count = 0
    for player_data in player_definitions:
        level, until_next_level = progression_for(player_data["experience"])
        db.add(
            models.Player(
                name=player_data["name"],
                title=player_data["title"],
                race=models.Race(player_data["race"]),
                profession=models.Profession(player_data["profession"]),
                birthday=epoch_millis_to_datetime(player_data["birthday"]),
                banned=player_data.get("banned", False),
                experience=player_data["experience"],
                level=level,
                until_next_level=until_next_level,
            )
        )
        seeded_count += 1

    db.commit()
    logger.info(f"Player seeding complete. Inserted {seeded_count} players.")
    return seeded_count
