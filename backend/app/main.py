# backend/app/main.py

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

# --- Setup Logging First ---
from app.core.logging_config import setup_logging

setup_logging()

# Get a logger for this module *after* setup is complete.
logger = logging.getLogger(__name__)

from app.api.error_handlers import register_error_handlers
from app.api.v1.api_router import api_router as v1_api_router
from app.core.config import settings
from app.crud.crud_player import seed_initial_players
from app.db import base_class
from app.db import session as db_session  # <-- Import the session module itself


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    logger.info("--- Application Startup Initiated ---")

    # 1. Initialize Database Engine
    logger.info("Initializing database engine...")
    db_session.engine = db_session.create_db_engine_with_retries()
    if db_session.engine is None:
        logger.critical("Failed to create database engine. Shutting down.")
        sys.exit(1)

    logger.info("Binding database engine to SessionLocal factory...")
    db_session.SessionLocal.configure(bind=db_session.engine)

    # 2. Create Database Tables
    logger.info("Creating database tables...")
    try:
        base_class.Base.metadata.create_all(bind=db_session.engine)
        logger.info("Database tables verified/created successfully.")
    except Exception as e:
        logger.critical(f"Error creating database tables: {e}", exc_info=True)
        sys.exit(1)

    # 3. Seed Initial Data
    if settings.SEED_INITIAL_PLAYERS:
        logger.info("Seeding initial players...")
        with db_session.SessionLocal() as db:
            try:
                seed_initial_players(db)
            except Exception as e:
                # A bad seed file must not keep the API from starting.
                logger.error(f"Error during player seeding: {e}", exc_info=True)
                db.rollback()
    else:
        logger.info("SEED_INITIAL_PLAYERS is off. Skipping player seeding.")

    logger.info("--- Application Startup Complete ---")

    yield  # The application is now running and accepting requests

    # --- SHUTDOWN ---
    logger.info("--- Application Shutdown Initiated ---")
    if db_session.engine:
        db_session.engine.dispose()
        logger.info("Database engine disposed.")
    logger.info("--- Application Shutdown Complete ---")


# --- FASTAPI APP INITIALIZATION ---
app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
register_error_handlers(app)

# --- ROUTERS ---
app.include_router(v1_api_router, prefix=settings.API_V1_STR)
logger.info("API routers included.")


# --- ROOT ENDPOINT ---
@app.get("/")
async def root():
    logger.debug("GET / request received.")
    return {"message": f"Welcome to {settings.PROJECT_NAME}."}
