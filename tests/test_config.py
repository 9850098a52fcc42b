"""
Tests for environment-driven settings and logging setup.
"""

import io
import logging

import pytest

from app.core.config import MAX_PORT, MIN_PORT, Settings
from app.core.logging import LOGGER_NAME, configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("TYPING_PORT", "TYPING_LOG_LEVEL", "TYPING_CLIENT_CRED", "TYPING_BUILD"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.PORT is None
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.CLIENT_CRED == "/etc/typing/google_client_cred.json"
        assert settings.color_logs is True

    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("TYPING_PORT", "8080")
        monkeypatch.setenv("TYPING_LOG_LEVEL", "warn")
        monkeypatch.setenv("TYPING_BUILD", "release")
        settings = Settings(_env_file=None)

        assert settings.get_port() == 8080
        assert settings.LOG_LEVEL == "WARN"
        assert settings.color_logs is False

    @pytest.mark.parametrize("port", ["80", "70000", "abc"])
    def test_invalid_port_falls_back_to_random(self, monkeypatch, port):
        monkeypatch.setenv("TYPING_PORT", port)
        settings = Settings(_env_file=None)

        assert settings.PORT is None
        assert MIN_PORT <= settings.get_port() <= MAX_PORT

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("TYPING_LOG_LEVEL", "verbose")
        assert Settings(_env_file=None).LOG_LEVEL == "DEBUG"


class TestLogging:

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger(LOGGER_NAME)
        handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
        yield
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate

    def test_format_and_level(self):
        stream = io.StringIO()
        configure_logging("WARN", color=False, stream=stream)

        logging.getLogger("typing.tests").info("hidden")
        logging.getLogger("typing.tests").warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "WARNING [typing.tests] shown" in output
        assert output.startswith("[")

    def test_reconfigure_replaces_handler(self):
        configure_logging("INFO", color=False, stream=io.StringIO())
        logger = configure_logging("INFO", color=True, stream=io.StringIO())
        assert len(logger.handlers) == 1

    def test_color(self):
        stream = io.StringIO()
        configure_logging("DEBUG", color=True, stream=stream)
        logging.getLogger("typing.tests").error("red")
        assert "\033[31mERROR\033[0m" in stream.getvalue()
