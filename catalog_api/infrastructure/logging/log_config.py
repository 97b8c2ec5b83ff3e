"""Logging setup for the catalog service.

The root logger takes ``log_level``; SQLAlchemy/driver loggers and uvicorn
loggers get their own levels so SQL echo or access lines can be turned up
or down independently. ``setup_logging()`` runs once from the app lifespan.
"""

import logging
import sys

from catalog_api.config import get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"

# Settings field -> loggers whose level it controls
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
        "asyncpg",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
}


def setup_logging() -> None:
    """Apply the configured levels and make sure something writes to stderr."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    # uvicorn installs its own handlers; plain scripts and tests do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s uvicorn=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
    )


def _parse_level(raw: str) -> int:
    """Map a level name to its ``logging`` constant; unknown names mean INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
