"""Tests for logging setup and formatters."""

import json
import logging

import pytest

from arith.core.errors import NumericOverflowError
from arith.core.logging import (
    StructuredFormatter,
    TextFormatter,
    get_context_logger,
    get_logger,
    setup_logging,
)
from arith.math.rational import RationalNumber


def _record(message="hello", **extra):
    record = logging.LogRecord("arith.test", logging.INFO, __file__, 10, message, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Test JSON and text output."""

    def test_structured_formatter(self):
        """Test JSON fields and extra data."""
        output = json.loads(StructuredFormatter().format(_record(extra_data={"value": "1/3"})))
        assert output["level"] == "INFO"
        assert output["logger"] == "arith.test"
        assert output["message"] == "hello"
        assert output["value"] == "1/3"

    def test_structured_formatter_stringifies_unknown_types(self):
        """Test non-JSON values fall back to str()."""
        output = json.loads(StructuredFormatter().format(_record(extra_data={"value": {1, 2}})))
        assert output["value"] == "{1, 2}"

    def test_structured_formatter_long_integers(self):
        """Test integers beyond the int/str digit limit are written as text."""
        value = 10 ** 5000
        output = json.loads(StructuredFormatter().format(_record(extra_data={"numerator": value, "bits": 12})))
        assert output["numerator"] == "1" + "0" * 5000
        assert output["bits"] == 12

    def test_text_formatter_appends_context(self):
        """Test context pairs follow the message."""
        line = TextFormatter().format(_record(extra_data={"component": "parser", "length": 3}))
        assert line.endswith("hello [component=parser length=3]")

    def test_text_formatter(self):
        """Test the human readable layout."""
        line = TextFormatter().format(_record())
        assert "arith.test - INFO - hello" in line


class TestSetupLogging:
    """Test logger configuration from settings."""

    def test_level_and_handler(self, settings_env, arith_logger):
        """Test the package logger is configured."""
        settings_env(LOG_LEVEL="debug")
        setup_logging()
        assert arith_logger.level == logging.DEBUG
        assert len(arith_logger.handlers) == 1
        assert isinstance(arith_logger.handlers[0].formatter, TextFormatter)
        assert not arith_logger.propagate

    def test_json_format(self, settings_env, arith_logger):
        """Test LOG_FORMAT=json selects the structured formatter."""
        settings_env(LOG_FORMAT="json")
        setup_logging()
        assert isinstance(arith_logger.handlers[0].formatter, StructuredFormatter)

    def test_log_file(self, settings_env, arith_logger, tmp_path):
        """Test LOG_FILE adds a file handler."""
        log_file = tmp_path / "logs" / "arith.log"
        settings_env(LOG_FILE=str(log_file), LOG_LEVEL="INFO")
        setup_logging()
        get_logger("arith.test").info("written")
        for handler in arith_logger.handlers:
            handler.flush()
        assert "written" in log_file.read_text()

    def test_repeated_setup_does_not_duplicate_handlers(self, arith_logger):
        """Test setup_logging replaces its handlers."""
        setup_logging()
        setup_logging()
        assert len(arith_logger.handlers) == 1


class TestContextLogger:
    """Test the context adapter."""

    def test_context_merged_into_extra_data(self, caplog):
        """Test permanent and per-call context."""
        logger = get_context_logger("arith.test", codec="binary64")
        with caplog.at_level(logging.INFO, logger="arith.test"):
            logger.info("converted", extra_data={"value": "1/3"})
        record = caplog.records[-1]
        assert record.extra_data == {"codec": "binary64", "value": "1/3"}

    def test_library_context(self, caplog):
        """Test overflow logging carries bit lengths instead of values."""
        with caplog.at_level(logging.DEBUG, logger="arith"):
            with pytest.raises(NumericOverflowError):
                RationalNumber(10 ** 5000).to_double()
        record = caplog.records[-1]
        assert record.extra_data["component"] == "bridge"
        assert record.extra_data["numerator_bits"] == (10 ** 5000).bit_length()
