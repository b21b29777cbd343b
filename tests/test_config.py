"""Tests for configuration, logging setup and command-line parsing."""
import logging

import pytest

from pocketcalc.config import LOG_LEVEL_ENV, log_level_from_env
from pocketcalc.logging_config import setup_logging
from pocketcalc.main import parse_args


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("pocketcalc")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestLogLevelFromEnv:

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert log_level_from_env() == logging.WARNING
        assert log_level_from_env(logging.ERROR) == logging.ERROR

    def test_named_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert log_level_from_env() == logging.DEBUG

    def test_unknown_name_uses_default(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert log_level_from_env() == logging.WARNING


class TestSetupLogging:

    def test_console_and_file(self, clean_logger, tmp_path):
        log_file = tmp_path / "calc.log"
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        assert clean_logger.level == logging.DEBUG
        assert len(clean_logger.handlers) == 2
        assert "Logging initialized." in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_does_not_duplicate_handlers(self, clean_logger):
        setup_logging()
        setup_logging()
        assert len(clean_logger.handlers) == 1

    def test_arithmetic_error_logged(self, clean_logger, tmp_path, press):
        log_file = tmp_path / "calc.log"
        setup_logging(level=logging.WARNING, log_file=str(log_file))
        press("6", "÷", "0", "=")
        assert "DIVISION_BY_ZERO" in log_file.read_text(encoding="utf-8")


class TestParseArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.debug is False
        assert args.log_file is None

    def test_flags(self):
        args = parse_args(["--debug", "--log-file", "calc.log"])
        assert args.debug is True
        assert args.log_file == "calc.log"

    def test_qt_options_ignored(self):
        assert parse_args(["-style", "fusion"]).debug is False
