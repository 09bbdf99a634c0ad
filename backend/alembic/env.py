# backend/alembic/env.py
import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context

# Make the 'app' package importable when alembic runs from backend/.
sys.path.insert(0, os.path.realpath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("ALEMBIC_ENV_PY_RUNNING", "true")

from app.core.config import settings
from app.db.base_class import Base
from app.models.player import Player  # noqa: F401  registers the players table

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def get_url() -> str | None:
    db_url_env = os.getenv("DB_URL")
    if db_url_env:
        return db_url_env
    return settings.DATABASE_URL

def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = get_url()
    if url is None:
        raise ValueError(
            "Database URL not found for offline migration. "
            "Set DB_URL or DATABASE_URL in the environment."
        )

    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=url.startswith("sqlite"),
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    db_config_section_dict = config.get_section(config.config_ini_section)
    if db_config_section_dict is None:
        raise ValueError(
            f"Alembic configuration section '{config.config_ini_section}' "
            "not found in alembic.ini. Cannot configure database for online migrations."
        )

    db_url = get_url()
    if db_url is None:
        raise ValueError(
            "Database URL not found for online migration. "
            "Set DB_URL or DATABASE_URL in the environment."
        )
    db_config_section_dict['sqlalchemy.url'] = db_url

    connectable = engine_from_config(
        db_config_section_dict,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
