# backend/app/core/config.py
import os
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Alembic's env.py sets this before importing the app so the settings never
# need a live database to load.
IS_ALEMBIC_ENV_PY_CONTEXT = os.getenv("ALEMBIC_ENV_PY_RUNNING") == "true"

class Settings(BaseSettings):
    PROJECT_NAME: str = "Player Registry - Backend"
    API_V1_STR: str = "/api/v1"

    DATABASE_URL: Optional[str] = "sqlite:///./players.db"
    DB_CONNECT_MAX_RETRIES: int = 10
    DB_CONNECT_RETRY_DELAY: float = 5.0 # seconds

    LOG_LEVEL: str = "INFO"

    # Paging defaults for GET /players when the caller leaves them out
    DEFAULT_PAGE_SIZE: int = 3
    MAX_PAGE_SIZE: int = 100

    SEED_INITIAL_PLAYERS: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding='utf-8', extra='ignore')

settings = Settings()

if IS_ALEMBIC_ENV_PY_CONTEXT:
    # Can't use logger before setup
    print(f"INFO: Settings loaded for Alembic env.py, DATABASE_URL={settings.DATABASE_URL}")
