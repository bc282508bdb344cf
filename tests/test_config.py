"""
Configuration tests — settings expose only what the app reads, and the
per-category log levels reach the loggers they name.
"""
import logging

import pytest

from blog_api.config import Settings, settings
from blog_api.logging_config import setup_logging


@pytest.fixture
def restore_log_levels():
    names = ["", "uvicorn", "uvicorn.access", "uvicorn.error",
             "sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_settings_fields():
    fields = set(Settings.model_fields)
    assert "DEBUG" not in fields
    assert {"DATABASE_URL", "LOG_LEVEL", "LOG_LEVEL_SQL", "LOG_LEVEL_UVICORN"} <= fields


def test_category_levels_applied(monkeypatch, restore_log_levels):
    monkeypatch.setattr(settings, "LOG_LEVEL", "WARNING")
    monkeypatch.setattr(settings, "LOG_LEVEL_SQL", "DEBUG")
    monkeypatch.setattr(settings, "LOG_LEVEL_UVICORN", "ERROR")

    setup_logging()

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.ERROR
    assert logging.getLogger("uvicorn.error").level == logging.ERROR


def test_unknown_level_falls_back_to_info(monkeypatch, restore_log_levels):
    monkeypatch.setattr(settings, "LOG_LEVEL_UVICORN", "chatty")
    setup_logging()
    assert logging.getLogger("uvicorn").level == logging.INFO
