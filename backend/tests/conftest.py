# backend/tests/conftest.py
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

# We have to import the REAL app and settings to modify them
from app import models
from app.core.config import settings
from app.db.base_class import Base
from app.db.session import build_engine, get_db
from app.game_logic.leveling import progression_for
from app.main import app

# --- TEST DATABASE URL ---
# In-memory SQLite; build_engine gives it a StaticPool so every session
# in a test sees the same database.
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture()
def engine():
    test_engine = build_engine(SQLALCHEMY_DATABASE_URL)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    with session_factory() as session:
        yield session


def _build_player(**overrides) -> models.Player:
    fields = {
        "name": "Aldric",
        "title": "Keeper of the Gate",
        "race": models.Race.HUMAN,
        "profession": models.Profession.WARRIOR,
        "birthday": datetime(2010, 6, 15),
        "banned": False,
        "experience": 0,
    }
    fields.update(overrides)
    player = models.Player(**fields)
    player.level, player.until_next_level = progression_for(player.experience)
    return player


@pytest.fixture()
def player_factory(db_session):
    """Inserts a player through the test's own session and returns it."""

    def _create(**overrides) -> models.Player:
        player = _build_player(**overrides)
        db_session.add(player)
        db_session.commit()
        db_session.refresh(player)
        return player

    return _create


@pytest.fixture()
def client(session_factory, monkeypatch):
    """
    A TestClient whose requests use the in-memory test database. The app's
    own lifespan still runs, pointed at a throwaway in-memory database with
    seeding switched off.
    """
    monkeypatch.setattr(settings, "DATABASE_URL", SQLALCHEMY_DATABASE_URL)
    monkeypatch.setattr(settings, "SEED_INITIAL_PLAYERS", False)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def stored_player(session_factory):
    """Inserts a player through a short-lived session, for API tests."""

    def _create(**overrides) -> int:
        with session_factory() as session:
            player = _build_player(**overrides)
            session.add(player)
            session.commit()
            return player.id

    return _create
