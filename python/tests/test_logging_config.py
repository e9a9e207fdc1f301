"""Unit tests for logging_config module."""

import io
import logging
import os
from unittest.mock import patch

import pytest

from xml_dispatcher.logging_config import (
    get_logger,
    logger,
    redirect_log_stream,
    resolve_log_level,
)


class TestGetLogger:
    """Test get_logger function."""

    def test_default_error_level(self):
        """Test that logger defaults to ERROR level when no env var set."""
        with patch.dict(os.environ, {}, clear=True):
            test_logger = get_logger("test_xml_default_logger")
            try:
                assert len(test_logger.handlers) > 0
                assert test_logger.level == logging.ERROR
            finally:
                test_logger.handlers.clear()

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("Warning", logging.WARNING),
            ("10", logging.DEBUG),
            ("40", logging.ERROR),
        ],
    )
    def test_xml_dispatcher_log_level(self, value, expected):
        """Test that XML_DISPATCHER_LOG_LEVEL accepts names in any case and numbers."""
        with patch.dict(os.environ, {"XML_DISPATCHER_LOG_LEVEL": value}, clear=True):
            test_logger = get_logger(f"test_xml_level_{value}_logger")
            try:
                assert test_logger.level == expected
            finally:
                test_logger.handlers.clear()

    def test_log_level_fallback(self):
        """Test that LOG_LEVEL is used when XML_DISPATCHER_LOG_LEVEL not set."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            test_logger = get_logger("test_xml_fallback_logger")
            try:
                assert test_logger.level == logging.DEBUG
            finally:
                test_logger.handlers.clear()

    def test_package_variable_takes_priority_over_log_level(self):
        """Test that XML_DISPATCHER_LOG_LEVEL takes priority over LOG_LEVEL."""
        with patch.dict(
            os.environ,
            {"XML_DISPATCHER_LOG_LEVEL": "INFO", "LOG_LEVEL": "DEBUG"},
            clear=True,
        ):
            test_logger = get_logger("test_xml_priority_logger")
            try:
                assert test_logger.level == logging.INFO
            finally:
                test_logger.handlers.clear()

    def test_invalid_log_level_raises(self):
        """Test that an unknown level name is rejected."""
        with patch.dict(os.environ, {"XML_DISPATCHER_LOG_LEVEL": "LOUD"}, clear=True):
            test_logger = logging.getLogger("test_xml_invalid_logger")
            try:
                with pytest.raises(ValueError):
                    get_logger("test_xml_invalid_logger")
            finally:
                test_logger.handlers.clear()

    def test_logger_not_reconfigured_if_already_configured(self):
        """Test that logger is not reconfigured if it already has handlers."""
        with patch.dict(os.environ, {"XML_DISPATCHER_LOG_LEVEL": "INFO"}):
            test_logger = get_logger("test_xml_reconfig_logger")
            try:
                initial_handler_count = len(test_logger.handlers)

                test_logger_again = get_logger("test_xml_reconfig_logger")

                assert test_logger is test_logger_again
                assert len(test_logger_again.handlers) == initial_handler_count
            finally:
                test_logger.handlers.clear()

    def test_logger_has_handler_and_formatter(self):
        """Test that logger has proper handler and formatter configured."""
        with patch.dict(os.environ, {"XML_DISPATCHER_LOG_LEVEL": "INFO"}):
            test_logger = get_logger("test_xml_format_logger")
            try:
                assert len(test_logger.handlers) == 1
                handler = test_logger.handlers[0]
                assert isinstance(handler, logging.StreamHandler)
                format_str = handler.formatter._fmt
                assert "%(levelname)s" in format_str
                assert "%(name)s" in format_str
                assert "%(filename)s" in format_str
                assert "%(lineno)d" in format_str
                assert "%(message)s" in format_str
            finally:
                test_logger.handlers.clear()

    def test_logger_propagate_false(self):
        """Test that logger propagate is set to False to avoid duplicate logs."""
        test_logger = get_logger("test_xml_propagate_logger")
        try:
            assert test_logger.propagate is False
        finally:
            test_logger.handlers.clear()

    def test_package_logger_name(self):
        """Test that the package logger uses the package name."""
        assert logger.name == "xml_dispatcher"


class TestResolveLogLevel:
    """Test resolve_log_level function."""

    def test_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert resolve_log_level() == "ERROR"

    def test_package_variable_first(self):
        with patch.dict(
            os.environ,
            {"XML_DISPATCHER_LOG_LEVEL": "info", "LOG_LEVEL": "DEBUG"},
            clear=True,
        ):
            assert resolve_log_level() == "INFO"

    def test_empty_package_variable_falls_back(self):
        with patch.dict(
            os.environ, {"XML_DISPATCHER_LOG_LEVEL": "", "LOG_LEVEL": "20"}, clear=True
        ):
            assert resolve_log_level() == 20


class TestRedirectLogStream:
    """Test redirect_log_stream context manager."""

    def test_package_and_child_loggers_are_redirected(self):
        parent = get_logger("test_xml_redirect")
        child = get_logger("test_xml_redirect.child")
        parent.setLevel(logging.INFO)
        child.setLevel(logging.INFO)
        stream = io.StringIO()
        try:
            with redirect_log_stream(stream, name="test_xml_redirect"):
                parent.info("from parent")
                child.info("from child")

            assert "from parent" in stream.getvalue()
            assert "from child" in stream.getvalue()
        finally:
            parent.handlers.clear()
            child.handlers.clear()

    def test_previous_stream_is_restored(self):
        redirected = get_logger("test_xml_restore")
        previous = redirected.handlers[0].stream
        try:
            with redirect_log_stream(io.StringIO(), name="test_xml_restore"):
                assert redirected.handlers[0].stream is not previous

            assert redirected.handlers[0].stream is previous
        finally:
            redirected.handlers.clear()

    def test_unrelated_loggers_are_untouched(self):
        unrelated = get_logger("test_xml_unrelated")
        previous = unrelated.handlers[0].stream
        try:
            with redirect_log_stream(io.StringIO(), name="test_xml_redirect_other"):
                assert unrelated.handlers[0].stream is previous
        finally:
            unrelated.handlers.clear()
