"""Tests for the domain's logging setup."""

import logging

import pytest
import structlog
from shared.domain import shelfwise


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level, filters = root.handlers[:], root.level, root.filters[:]
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers, root.filters = handlers, filters
    root.setLevel(level)
    structlog.reset_defaults()


def test_log_files_use_the_shelfwise_prefix(tmp_path, restore_logging):
    shelfwise.configure_logging(level="INFO", log_dir=str(tmp_path))

    structlog.get_logger("shelfwise.tests").info("Catalogue ready", books=3)
    structlog.get_logger("shelfwise.tests").error("Treasury unavailable")
    for handler in logging.getLogger().handlers:
        handler.flush()

    main_log = (tmp_path / "shelfwise.log").read_text()
    assert "Catalogue ready" in main_log
    assert "Treasury unavailable" in (tmp_path / "shelfwise_error.log").read_text()


def test_level_can_be_raised(tmp_path, restore_logging):
    shelfwise.configure_logging(level="WARNING", log_dir=str(tmp_path))

    structlog.get_logger("shelfwise.tests").info("Too chatty")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "Too chatty" not in (tmp_path / "shelfwise.log").read_text()
