"""Tests for environment settings and logging setup."""

import logging
from datetime import date

import pytest

from tasklist.config import DEFAULT_LOG_LEVEL, get_settings
from tasklist.core.exceptions import InvalidInputError
from tasklist.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TASKLIST_LOG_LEVEL", "TASKLIST_LOG_FILE", "TASKLIST_TODAY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_defaults():
    settings = get_settings()
    assert settings.log_level == DEFAULT_LOG_LEVEL
    assert settings.log_file is None
    assert settings.today is None


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKLIST_LOG_FILE", str(tmp_path / "tasklist.log"))
    monkeypatch.setenv("TASKLIST_TODAY", "10.10.2020")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_file == tmp_path / "tasklist.log"
    assert settings.today == date(2020, 10, 10)


def test_invalid_today(monkeypatch):
    monkeypatch.setenv("TASKLIST_TODAY", "2020-10-10")
    with pytest.raises(InvalidInputError):
        get_settings()


def test_setup_logging_writes_debug_to_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "tasklist.log"
    setup_logging(level="WARNING", log_file=log_file)

    logging.getLogger("tasklist.core.repository").debug("hello from tasklist")
    for h in restore_root_logger.handlers:
        h.flush()

    assert "hello from tasklist" in log_file.read_text(encoding="utf-8")


def test_setup_logging_replaces_handlers(restore_root_logger):
    setup_logging(level="INFO")
    setup_logging(level="INFO")

    stream_handlers = [
        h for h in restore_root_logger.handlers if isinstance(h, logging.StreamHandler)
    ]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].level == logging.INFO
