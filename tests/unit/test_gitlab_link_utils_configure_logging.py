"""Unit tests for gitlab_link.utils logging helpers."""

import logging

import pytest

from gitlab_link.utils import configure_logging as configure_logging_module
from gitlab_link.utils.configure_logging import configure_logging
from gitlab_link.utils.get_logger import get_logger


@pytest.fixture
def fresh_logging(monkeypatch):
    """Reset the one-shot guard and restore the package logger afterwards."""
    logger = logging.getLogger("gitlab_link")
    handlers, level = list(logger.handlers), logger.level
    monkeypatch.setattr(configure_logging_module, "_CONFIGURED", False)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_get_logger_namespaced():
    assert get_logger("book").name == "gitlab_link.book"


def test_level_from_environment(fresh_logging, monkeypatch):
    monkeypatch.setenv("GITLAB_LINK_LOG", "debug")

    configure_logging()

    assert fresh_logging.level == logging.DEBUG


def test_default_level_is_warning(fresh_logging, monkeypatch):
    monkeypatch.delenv("GITLAB_LINK_LOG", raising=False)

    configure_logging()

    assert fresh_logging.level == logging.WARNING


def test_configures_once(fresh_logging):
    before = len(fresh_logging.handlers)

    configure_logging("INFO")
    configure_logging("DEBUG")

    assert len(fresh_logging.handlers) == before + 1
    assert fresh_logging.level == logging.INFO


def test_unknown_level_falls_back_to_warning(fresh_logging, monkeypatch, capsys):
    monkeypatch.setenv("GITLAB_LINK_LOG", "verbose")

    configure_logging()

    assert fresh_logging.level == logging.WARNING
    assert "Unknown log level 'verbose', using WARNING" in capsys.readouterr().err


def test_unknown_level_does_not_break_commands(fresh_logging, monkeypatch):
    from gitlab_link.cli import main

    monkeypatch.setenv("GITLAB_LINK_LOG", "verbose")

    with pytest.raises(SystemExit) as excinfo:
        main(["supports", "html"])

    assert excinfo.value.code == 0
