"""Unit tests for logging setup."""

import logging

from rich.logging import RichHandler

from wcag_audit.utils.logging import (
    ROOT_LOGGER,
    StructuredFormatter,
    configure_logging,
    get_logger,
    get_logger_with_context,
)


class TestGetLogger:
    """Tests for get_logger."""

    def test_namespaced(self):
        """Test that loggers live under the package namespace."""
        assert get_logger("runner").name == "wcag_audit.runner"
        assert get_logger("wcag_audit.scanners").name == "wcag_audit.scanners"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_rich_handler(self):
        """Test that interactive logging uses rich."""
        configure_logging("DEBUG")
        logger = logging.getLogger(ROOT_LOGGER)

        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0], RichHandler)

    def test_structured(self):
        """Test structured mode."""
        configure_logging("warning", structured=True)
        logger = logging.getLogger(ROOT_LOGGER)

        assert logger.level == logging.WARNING
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_reconfigure_replaces_handler(self):
        """Test that configuring twice does not duplicate handlers."""
        configure_logging()
        configure_logging()
        assert len(logging.getLogger(ROOT_LOGGER).handlers) == 1


class TestContextLogging:
    """Tests for context fields."""

    def test_structured_formatter_appends_fields(self):
        """Test that context fields are appended as key=value pairs."""
        record = logging.LogRecord("wcag_audit.runner", logging.INFO, __file__, 1, "Auditing", None, None)
        record.context_fields = {"path": "templates/base.html"}

        assert StructuredFormatter("%(message)s").format(record) == "Auditing path=templates/base.html"

    def test_plain_record(self):
        """Test that records without context are unchanged."""
        record = logging.LogRecord("wcag_audit", logging.INFO, __file__, 1, "hello", None, None)
        assert StructuredFormatter("%(message)s").format(record) == "hello"

    def test_adapter_attaches_context(self, caplog):
        """Test that the adapter passes context fields to records."""
        log = get_logger_with_context("runner", path="a.html")
        with caplog.at_level(logging.INFO, logger="wcag_audit"):
            log.info("Auditing %s", "a.html")

        assert caplog.records[-1].context_fields == {"path": "a.html"}
