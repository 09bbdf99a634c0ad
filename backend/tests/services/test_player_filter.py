# backend/tests/services/test_player_filter.py
from datetime import datetime
from types import SimpleNamespace

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select

from app import models
from app.core.exceptions import ValidationError
from app.crud.player_criteria import Criterion, Operator, to_where_clause
from app.services.player_filter import (
    PlayerFilter,
    combine,
    filter_by_banned,
    filter_by_birthday,
    filter_by_experience,
    filter_by_level,
    filter_by_name,
    filter_by_profession,
    filter_by_race,
    filter_by_title,
)

JAN_1_2000_MS = 946684800000
JAN_1_2015_MS = 1420070400000


# --- Builders ---

def test_null_parameters_build_no_criteria():
    assert filter_by_name(None) is None
    assert filter_by_title(None) is None
    assert filter_by_race(None) is None
    assert filter_by_profession(None) is None
    assert filter_by_banned(None) is None
    assert filter_by_birthday(None, None) is None
    assert filter_by_experience(None, None) is None
    assert filter_by_level(None, None) is None


def test_text_filters_are_contains():
    assert filter_by_name("ald") == Criterion("name", Operator.CONTAINS, "ald")
    assert filter_by_title("Gate") == Criterion("title", Operator.CONTAINS, "Gate")


def test_enum_and_flag_filters_are_equality():
    assert filter_by_race(models.Race.ELF) == Criterion("race", Operator.EQUALS, models.Race.ELF)
    assert filter_by_profession(models.Profession.DRUID) == Criterion(
        "profession", Operator.EQUALS, models.Profession.DRUID
    )
    assert filter_by_banned(False) == Criterion("banned", Operator.EQUALS, False)


@pytest.mark.parametrize(
    "builder, field",
    [(filter_by_experience, "experience"), (filter_by_level, "level")],
)
def test_numeric_range_three_way_logic(builder, field):
    assert builder(10, None) == Criterion(field, Operator.GREATER_OR_EQUAL, 10)
    assert builder(None, 20) == Criterion(field, Operator.LESS_OR_EQUAL, 20)
    assert builder(10, 20) == Criterion(field, Operator.BETWEEN, (10, 20))


def test_birthday_range_converts_epoch_millis():
    after = datetime(2000, 1, 1)
    before = datetime(2015, 1, 1)
    assert filter_by_birthday(JAN_1_2000_MS, None) == Criterion("birthday", Operator.GREATER_OR_EQUAL, after)
    assert filter_by_birthday(None, JAN_1_2015_MS) == Criterion("birthday", Operator.LESS_OR_EQUAL, before)
    assert filter_by_birthday(JAN_1_2000_MS, JAN_1_2015_MS) == Criterion(
        "birthday", Operator.BETWEEN, (after, before)
    )


def test_unrepresentable_birthday_bound_is_a_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        filter_by_birthday(10**18, None)
    assert exc_info.value.field == "after"


# --- Composition ---

def test_combine_drops_absent_criteria():
    name = filter_by_name("a")
    assert combine(None, name, None) == [name]
    assert combine() == []


def test_empty_filter_matches_everything():
    player_filter = PlayerFilter()
    assert player_filter.criteria() == []
    assert str(player_filter.to_where_clause()) == str(to_where_clause([]))
    assert player_filter.matches(SimpleNamespace()) is True


@pytest.mark.parametrize("field", ["min_experience", "max_experience", "min_level", "max_level"])
def test_numeric_bounds_are_limited_to_32_bits(field):
    assert PlayerFilter(**{field: 2**31 - 1}).criteria() != []
    assert PlayerFilter(**{field: -(2**31)}).criteria() != []
    with pytest.raises(PydanticValidationError):
        PlayerFilter(**{field: 2**31})
    with pytest.raises(PydanticValidationError):
        PlayerFilter(**{field: -(2**31) - 1})


def test_single_filter_yields_only_its_own_criterion():
    assert PlayerFilter(banned=True).criteria() == [Criterion("banned", Operator.EQUALS, True)]
    assert PlayerFilter(min_level=3).criteria() == [Criterion("level", Operator.GREATER_OR_EQUAL, 3)]


def test_all_filters_are_conjunctive():
    player_filter = PlayerFilter(
        name="a",
        title="b",
        race=models.Race.ORC,
        profession=models.Profession.ROGUE,
        after=JAN_1_2000_MS,
        before=JAN_1_2015_MS,
        banned=False,
        min_experience=0,
        max_experience=100,
        min_level=0,
        max_level=1,
    )
    fields = [criterion.field for criterion in player_filter.criteria()]
    assert fields == ["name", "title", "race", "profession", "birthday", "banned", "experience", "level"]


# --- In-memory evaluation ---

def test_matches_evaluates_in_memory():
    player = SimpleNamespace(
        name="Skarra",
        title="Ashen Blade",
        race=models.Race.ORC,
        profession=models.Profession.ROGUE,
        birthday=datetime(2006, 2, 14),
        banned=True,
        experience=31000,
        level=24,
    )
    assert PlayerFilter(name="kar", race=models.Race.ORC, banned=True).matches(player)
    assert PlayerFilter(min_experience=31000, max_experience=31000).matches(player)
    assert not PlayerFilter(name="KAR").matches(player)
    assert not PlayerFilter(max_level=23).matches(player)
    assert not PlayerFilter(after=JAN_1_2015_MS).matches(player)


# --- Against the database ---

def _names(db_session, player_filter: PlayerFilter):
    stmt = select(models.Player.name).where(player_filter.to_where_clause()).order_by(models.Player.id)
    return list(db_session.scalars(stmt))


def test_sql_clauses_select_the_same_players(db_session, player_factory):
    player_factory(name="Aldric", title="Keeper", race=models.Race.HUMAN, experience=100)
    player_factory(name="Lirael", title="Archer", race=models.Race.ELF, birthday=datetime(2004, 11, 2), experience=99500)
    player_factory(name="Skarra", title="Ashen Blade", race=models.Race.ORC, banned=True, experience=31000)

    assert _names(db_session, PlayerFilter()) == ["Aldric", "Lirael", "Skarra"]
    assert _names(db_session, PlayerFilter(name="ra")) == ["Lirael", "Skarra"]
    assert _names(db_session, PlayerFilter(race=models.Race.ELF)) == ["Lirael"]
    assert _names(db_session, PlayerFilter(banned=False)) == ["Aldric", "Lirael"]
    assert _names(db_session, PlayerFilter(min_experience=100, max_experience=31000)) == ["Aldric", "Skarra"]
    assert _names(db_session, PlayerFilter(max_level=1)) == ["Aldric"]
    assert _names(db_session, PlayerFilter(before=JAN_1_2015_MS, after=JAN_1_2000_MS, banned=False)) == [
        "Aldric",
        "Lirael",
    ]


def test_sql_contains_is_case_sensitive_and_literal(db_session, player_factory):
    player_factory(name="Aldric")
    player_factory(name="50%_off")

    assert _names(db_session, PlayerFilter(name="ald")) == []
    assert _names(db_session, PlayerFilter(name="Ald")) == ["Aldric"]
    assert _names(db_session, PlayerFilter(name="%")) == ["50%_off"]
    assert _names(db_session, PlayerFilter(name="_")) == ["50%_off"]
