"""Logging setup for wcag-audit."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "wcag_audit"


class StructuredFormatter(logging.Formatter):
    """Formatter that appends ``key=value`` context fields to each message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = getattr(record, "context_fields", None)
        if not fields:
            return message
        suffix = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{message} {suffix}"


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    structured: bool = False,
) -> None:
    """Configure the ``wcag_audit`` logger.

    Interactive runs log through rich to stderr; structured mode emits plain
    lines with context fields, suitable for CI logs.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string for structured mode
        structured: Emit plain structured lines instead of rich output
    """
    handler: logging.Handler
    if structured:
        handler = logging.StreamHandler()
        handler.setFormatter(
            StructuredFormatter(format_string or "%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter(format_string or "%(message)s"))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``wcag_audit`` namespace.

    Args:
        name: Module name; prefixed with ``wcag_audit.`` when needed

    Returns:
        Logger instance
    """
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


class ContextAdapter(logging.LoggerAdapter):
    """Adapter that attaches fixed context fields (e.g. the document path)."""

    def process(
        self, msg: str, kwargs: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        extra["context_fields"] = self.extra
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> ContextAdapter:
    """Get a logger whose records carry the given context fields.

    Args:
        name: Module name
        **context: Fields added to every record

    Returns:
        ContextAdapter wrapping the module logger
    """
    return ContextAdapter(get_logger(name), context)
