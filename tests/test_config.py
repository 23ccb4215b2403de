"""Tests for configuration getters and logging setup."""

import logging

import pytest

from funcystr import config
from funcystr.utilities.logging import setup_logging


class TestMaxDepth:
    def test_unset_is_unbounded(self, monkeypatch):
        monkeypatch.delenv("FUNCYSTR_MAX_DEPTH", raising=False)
        assert config.get_max_depth() is None

    @pytest.mark.parametrize("value", ["0", "-3", ""])
    def test_non_positive_is_unbounded(self, monkeypatch, value):
        monkeypatch.setenv("FUNCYSTR_MAX_DEPTH", value)
        assert config.get_max_depth() is None

    def test_positive(self, monkeypatch):
        monkeypatch.setenv("FUNCYSTR_MAX_DEPTH", "50")
        assert config.get_max_depth() == 50

    def test_invalid_falls_back_with_warning(self, monkeypatch, caplog):
        monkeypatch.setenv("FUNCYSTR_MAX_DEPTH", "lots")
        with caplog.at_level(logging.WARNING, logger="funcystr.config"):
            assert config.get_max_depth() is None
        assert "Invalid FUNCYSTR_MAX_DEPTH" in caplog.text


class TestOtherSettings:
    def test_http_timeout(self, monkeypatch):
        monkeypatch.delenv("FUNCYSTR_HTTP_TIMEOUT", raising=False)
        assert config.get_http_timeout() == config.DEFAULT_HTTP_TIMEOUT
        monkeypatch.setenv("FUNCYSTR_HTTP_TIMEOUT", "2.5")
        assert config.get_http_timeout() == 2.5

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("FUNCYSTR_LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"

    @pytest.mark.parametrize("value", ["verbose", "", "loud "])
    def test_unknown_log_level_falls_back(self, monkeypatch, caplog, value):
        monkeypatch.setenv("FUNCYSTR_LOG_LEVEL", value)
        with caplog.at_level(logging.WARNING, logger="funcystr.config"):
            assert config.get_log_level() == config.DEFAULT_LOG_LEVEL
        assert "Invalid FUNCYSTR_LOG_LEVEL" in caplog.text

    def test_user_agent(self, monkeypatch):
        monkeypatch.delenv("FUNCYSTR_USER_AGENT", raising=False)
        assert config.get_user_agent() == config.DEFAULT_USER_AGENT


class TestSetupLogging:
    def test_idempotent(self):
        logger = setup_logging("WARNING")
        handlers = list(logger.handlers)
        setup_logging("DEBUG")
        assert logger.handlers == handlers
        assert logger.level == logging.DEBUG

    def test_unknown_env_level_uses_default(self, monkeypatch):
        monkeypatch.setenv("FUNCYSTR_LOG_LEVEL", "verbose")
        logger = setup_logging()
        assert logger.level == logging.getLevelName(config.DEFAULT_LOG_LEVEL)
