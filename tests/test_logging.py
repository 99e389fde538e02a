"""Tests for logging configuration."""

import json
import logging
import sys
from unittest.mock import patch

from azure_rerank.config import Environment, Settings
from azure_rerank.logging_config import (
    DevFormatter,
    JSONFormatter,
    get_logger,
    setup_logging,
)


def make_record(
    msg: str = "Test message",
    level: int = logging.INFO,
    **extra: object,
) -> logging.LogRecord:
    record = logging.LogRecord(
        name="azure_rerank.test",
        level=level,
        pathname="/app/module.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_format_basic_message(self) -> None:
        """Basic log message is formatted as JSON."""
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "azure_rerank.test"
        assert data["message"] == "Test message"
        assert data["file"] == "/app/module.py:42"
        assert "timestamp" in data
        assert "extra" not in data

    def test_format_includes_extra_fields(self) -> None:
        """Fields passed via extra= are nested under "extra"."""
        record = make_record(document_count=4, status=401)
        data = json.loads(JSONFormatter().format(record))

        assert data["extra"] == {"document_count": 4, "status": 401}

    def test_format_with_exception(self) -> None:
        """Exception info is included in output."""
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = make_record("Error", level=logging.ERROR)
        record.exc_info = exc_info
        data = json.loads(JSONFormatter().format(record))

        assert "ValueError" in data["exception"]


class TestDevFormatter:
    """Tests for development formatter."""

    def test_format_includes_level(self) -> None:
        """Development format includes level, logger and message."""
        output = DevFormatter().format(make_record("Warning message", logging.WARNING))

        assert "WARNING" in output
        assert "azure_rerank.test" in output
        assert "Warning message" in output

    def test_format_appends_extra_fields(self) -> None:
        """Extra fields follow the message as key=value pairs."""
        output = DevFormatter().format(make_record(top_n=3, document_count=2))
        assert output.endswith("| document_count=2 top_n=3")


class TestSetupLogging:
    """Tests for logging setup."""

    def test_returns_root_logger(self) -> None:
        """setup_logging returns root logger."""
        logger = setup_logging(level="INFO", json_output=False)
        assert logger is logging.getLogger()

    def test_uses_json_in_production(self) -> None:
        """JSON output is used in production environment."""
        mock_settings = Settings(environment=Environment.PRODUCTION)

        with patch("azure_rerank.logging_config.get_settings", return_value=mock_settings):
            setup_logging()

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_uses_dev_formatter_in_development(self) -> None:
        """Dev formatter is used in development environment."""
        mock_settings = Settings(environment=Environment.DEVELOPMENT)

        with patch("azure_rerank.logging_config.get_settings", return_value=mock_settings):
            setup_logging()

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DevFormatter)

    def test_level_override(self) -> None:
        """Log level can be overridden."""
        setup_logging(level="DEBUG", json_output=False)
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Unknown level names fall back to INFO."""
        setup_logging(level="chatty", json_output=False)
        assert logging.getLogger().level == logging.INFO

    def test_httpx_quieted(self) -> None:
        """httpx request logging is raised to WARNING."""
        setup_logging(level="DEBUG", json_output=False)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


class TestGetLogger:
    """Tests for named logger retrieval."""

    def test_returns_named_logger(self) -> None:
        """get_logger returns a logger with the given name."""
        logger = get_logger("azure_rerank.rerank.service")
        assert logger.name == "azure_rerank.rerank.service"
