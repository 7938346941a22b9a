"""
Tests for logging setup — level precedence and handlers.
"""

import logging
from pathlib import Path

import pytest

from whyinstalled.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    ENV_LOG_LEVEL,
    configure_cli_logging,
    parse_level,
    resolve_level,
)


class TestParseLevel:
    def test_known(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level(" ERROR ") == logging.ERROR

    def test_unknown_falls_back(self):
        assert parse_level("chatty") == logging.WARNING
        assert parse_level(None) == logging.WARNING
        assert parse_level("") == logging.WARNING


class TestResolveLevel:
    def test_default_is_warning(self):
        assert resolve_level(environ={}) == logging.WARNING

    def test_env_var(self):
        assert resolve_level(environ={ENV_LOG_LEVEL: "info"}) == logging.INFO

    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            ({"debug": True, "verbose": True, "quiet": True}, logging.DEBUG),
            ({"verbose": True, "quiet": True}, logging.INFO),
            ({"quiet": True}, logging.ERROR),
        ],
    )
    def test_flags_beat_env(self, flags: dict, expected: int):
        env = {ENV_LOG_LEVEL: "CRITICAL"}
        assert resolve_level(environ=env, **flags) == expected


class TestConfigureCliLogging:
    def test_console_only(self):
        level = configure_cli_logging(verbose=True, environ={})
        logger = logging.getLogger("whyinstalled")
        assert level == logging.INFO
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_reconfigure_replaces_handlers(self):
        configure_cli_logging(environ={})
        configure_cli_logging(debug=True, environ={})
        assert len(logging.getLogger("whyinstalled").handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "why.log"
        env = {ENV_LOG_FILE: str(log_file), ENV_LOG_FILE_LEVEL: "DEBUG"}
        level = configure_cli_logging(environ=env)
        logger = logging.getLogger("whyinstalled")
        assert level == logging.WARNING
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        logging.getLogger("whyinstalled.core.services").debug("into the file")
        for h in logger.handlers:
            h.flush()
        assert "into the file" in log_file.read_text()
