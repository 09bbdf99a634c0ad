# backend/app/core/logging_config.py
import logging
import sys

from app.core.config import settings  # For LOG_LEVEL


def setup_logging():
    """
    Configures logging for the application.
    Sets a basic configuration that logs to stdout.
    The log level is determined by the LOG_LEVEL setting (env var or .env).
    """
    log_level_str = settings.LOG_LEVEL.upper()
    numeric_level = getattr(logging, log_level_str, None)

    if not isinstance(numeric_level, int):
        print(
            f"--- LOGGING_CONFIG.PY: Invalid log level: {log_level_str}. Defaulting to INFO. ---",
            flush=True,
        )
        numeric_level = logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()

    # Clear any existing handlers on the root logger to avoid duplicate logs
    # if this is called more than once (uvicorn reload, test sessions).
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(stream_handler)
    root_logger.setLevel(numeric_level)

    # Engine SQL logging stays at WARNING regardless of LOG_LEVEL.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    loggers_to_check = [
        "app.main",
        "app.services.player_service",
        "app.crud.crud_player",
    ]
    for logger_name in loggers_to_check:
        temp_logger = logging.getLogger(logger_name)
        effective_level = temp_logger.getEffectiveLevel()
        root_logger.debug(
            f"Effective level for '{logger_name}': {logging.getLevelName(effective_level)}"
        )

    root_logger.info(
        f"Logging setup complete. Root logger level set to {logging.getLevelName(root_logger.level)}."
    )
