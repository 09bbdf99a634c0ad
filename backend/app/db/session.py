# backend/app/db/session.py
import time
import logging
from typing import Generator
from sqlalchemy import create_engine, event, exc
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from ..core.config import settings

# Logger for this module
logger = logging.getLogger(__name__)

if settings.DATABASE_URL is None:
    raise ValueError("DATABASE_URL is not set in the environment or configuration.")

# The engine is a placeholder until the application lifespan creates it.
engine = None
# The SessionLocal factory exists now, but is not bound to any engine yet.
SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def _enable_case_sensitive_like(dbapi_connection, connection_record):
    # Name/title filters use LIKE; SQLite's LIKE ignores ASCII case by default.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """
    Creates an engine for the given URL. SQLite URLs get the connection
    arguments FastAPI's threadpool needs, in-memory SQLite gets a StaticPool
    so every session sees the same database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        created_engine = create_engine(database_url, **kwargs)
        event.listen(created_engine, "connect", _enable_case_sensitive_like)
        return created_engine
    return create_engine(database_url, pool_pre_ping=True)


def create_db_engine_with_retries() -> Engine:
    """
    Creates, tests, and returns a new database engine. Retries connection
    failures up to DB_CONNECT_MAX_RETRIES times before giving up.
    """
    max_retries = settings.DB_CONNECT_MAX_RETRIES
    for attempt in range(max_retries):
        try:
            assert settings.DATABASE_URL is not None, "DATABASE_URL cannot be None"
            created_engine = build_engine(str(settings.DATABASE_URL))
            with created_engine.connect():
                logger.info("Database connection successful during creation.")
                return created_engine
        except exc.OperationalError as e:
            logger.warning(f"Database connection attempt {attempt + 1}/{max_retries} failed: {e}")
            if attempt < max_retries - 1:
                logger.warning(f"Retrying in {settings.DB_CONNECT_RETRY_DELAY} seconds...")
                time.sleep(settings.DB_CONNECT_RETRY_DELAY)
            else:
                logger.error("Max retries reached. Could not connect to the database.")
                raise

    raise RuntimeError("Could not connect to database after multiple retries.")


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session bound to the engine
    created during application startup.
    """
    if engine is None:
        raise RuntimeError("Database engine has not been initialized. The application lifespan manager may have failed.")

    db = SessionLocal(bind=engine)
    try:
        yield db
    finally:
        db.close()
