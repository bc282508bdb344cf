"""
Logging setup for the Blog API.

Applies the root level from ``settings.LOG_LEVEL`` and per-category levels
for the noisy third-party loggers (SQLAlchemy statements, uvicorn access
lines) so they can be tuned without touching application loggers.
"""
import logging
import sys

from blog_api.config import settings

_CATEGORY_LEVELS: dict[str, list[str]] = {
    "LOG_LEVEL_SQL": ["sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"],
    "LOG_LEVEL_UVICORN": ["uvicorn", "uvicorn.access", "uvicorn.error"],
}


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    """Configure logging levels from settings.  Call once at startup."""
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.LOG_LEVEL))

    # uvicorn installs its own handlers; scripts and tests may not have any.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(handler)

    for setting_name, logger_names in _CATEGORY_LEVELS.items():
        level = _parse_level(getattr(settings, setting_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s env=%s", settings.LOG_LEVEL, settings.APP_ENV
    )
