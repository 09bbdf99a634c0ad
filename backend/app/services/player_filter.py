# backend/app/services/player_filter.py
"""
Composable player filters.

Each `filter_by_*` builder turns one optional query parameter (or a pair of
range bounds) into a `Criterion`, or into None when the parameter is absent.
`combine` drops the Nones, and `to_where_clause` ANDs what is left into a
single SQLAlchemy clause. No criteria means "match every player".

A Criterion (see `app.crud.player_criteria`) is a plain value (field,
operator, operand), so the same filter can be rendered as SQL for the
repository or evaluated in memory with `matches`.
"""
import logging
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field
from sqlalchemy.sql.elements import ColumnElement

from .. import models
from ..crud.player_criteria import Criterion, Operator, to_where_clause
from ..core.exceptions import ValidationError
from ..core.time_utils import epoch_millis_to_datetime
from ..schemas.page import MAX_QUERY_INT, MIN_QUERY_INT

logger = logging.getLogger(__name__)


def _range(field: str, low: Any, high: Any) -> Optional[Criterion]:
    if low is None and high is None:
        return None
    if low is None:
        return Criterion(field, Operator.LESS_OR_EQUAL, high)
    if high is None:
        return Criterion(field, Operator.GREATER_OR_EQUAL, low)
    return Criterion(field, Operator.BETWEEN, (low, high))


def _bound_to_datetime(param: str, millis: Optional[int]) -> Optional[datetime]:
    if millis is None:
        return None
    try:
        return epoch_millis_to_datetime(millis)
    except OverflowError:
        raise ValidationError(param, f"'{param}' is not a representable timestamp", millis)


def filter_by_name(name: Optional[str]) -> Optional[Criterion]:
    if name is None:
        return None
    return Criterion("name", Operator.CONTAINS, name)


def filter_by_title(title: Optional[str]) -> Optional[Criterion]:
    if title is None:
        return None
    return Criterion("title", Operator.CONTAINS, title)


def filter_by_race(race: Optional[models.Race]) -> Optional[Criterion]:
    if race is None:
        return None
    return Criterion("race", Operator.EQUALS, race)


def filter_by_profession(profession: Optional[models.Profession]) -> Optional[Criterion]:
    if profession is None:
        return None
    return Criterion("profession", Operator.EQUALS, profession)


def filter_by_banned(banned: Optional[bool]) -> Optional[Criterion]:
    if banned is None:
        return None
    return Criterion("banned", Operator.EQUALS, banned)


def filter_by_birthday(after: Optional[int], before: Optional[int]) -> Optional[Criterion]:
    """`after` and `before` are inclusive epoch-millisecond bounds."""
    return _range(
        "birthday",
        _bound_to_datetime("after", after),
        _bound_to_datetime("before", before),
    )


def filter_by_experience(min_experience: Optional[int], max_experience: Optional[int]) -> Optional[Criterion]:
    return _range("experience", min_experience, max_experience)


def filter_by_level(min_level: Optional[int], max_level: Optional[int]) -> Optional[Criterion]:
    return _range("level", min_level, max_level)


def combine(*criteria: Optional[Criterion]) -> List[Criterion]:
    return [criterion for criterion in criteria if criterion is not None]


class PlayerFilter(BaseModel):
    """
    The full set of optional filters accepted when listing or counting players.
    """
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[models.Race] = None
    profession: Optional[models.Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = Field(None, ge=MIN_QUERY_INT, le=MAX_QUERY_INT)
    max_experience: Optional[int] = Field(None, ge=MIN_QUERY_INT, le=MAX_QUERY_INT)
    min_level: Optional[int] = Field(None, ge=MIN_QUERY_INT, le=MAX_QUERY_INT)
    max_level: Optional[int] = Field(None, ge=MIN_QUERY_INT, le=MAX_QUERY_INT)

    def criteria(self) -> List[Criterion]:
        criteria = combine(
            filter_by_name(self.name),
            filter_by_title(self.title),
            filter_by_race(self.race),
            filter_by_profession(self.profession),
            filter_by_birthday(self.after, self.before),
            filter_by_banned(self.banned),
            filter_by_experience(self.min_experience, self.max_experience),
            filter_by_level(self.min_level, self.max_level),
        )
        logger.debug(f"Player filter resolved to {len(criteria)} criteria: {criteria}")
        return criteria

    def to_where_clause(self) -> ColumnElement:
        return to_where_clause(self.criteria())

    def matches(self, player: Any) -> bool:
        return all(criterion.matches(player) for criterion in self.criteria())
