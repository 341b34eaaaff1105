"""Standard-library logging for the libraries under the comments API.

Our own code logs through logfire. uvicorn, SQLAlchemy and alembic use the
logging module; their records are forwarded to logfire as well, so one
console and one trace view show both.
"""

import logging

import logfire

from lostfound.config import Settings

# Chatty loggers and the level they run at outside debug mode
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,  # FastAPI spans already cover requests
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
}


def log_level(settings: Settings) -> int:
    """DEBUG in debug mode, WARNING in production, INFO otherwise."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route stdlib log records to logfire at the environment's level.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level if settings.debug else quiet_level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
