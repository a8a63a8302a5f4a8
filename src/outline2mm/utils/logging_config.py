"""Logging configuration shared by the library and the server."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from outline2mm.config import OUTLINE2MM_LOG_LEVEL


class _ExtraFormatter(logging.Formatter):
    """Append ``extra={...}`` context to the rendered message."""

    _RESERVED = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        message = super().format(record)
        context = {key: value for key, value in vars(record).items() if key not in self._RESERVED}
        if not context:
            return message
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        return f"{message} [{rendered}]"


def configure_logging(level: str = OUTLINE2MM_LOG_LEVEL) -> None:
    """Install a rich console handler on the root logger.

    Calling this again only updates the level.

    Args:
        level: Logging level name.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if _has_rich_handler(root):
        return

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.setFormatter(_ExtraFormatter(fmt="%(name)s: %(message)s"))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger, configuring logging on first use."""
    if not _has_rich_handler(logging.getLogger()):
        configure_logging()
    return logging.getLogger(name)


def _has_rich_handler(logger: logging.Logger) -> bool:
    return any(isinstance(handler, RichHandler) for handler in logger.handlers)
