"""Logging for padder.

The ``padder`` logger hands its records to the active reporter, so an
overflow warning raised while formatting records is printed by the same
backend as the CLI's own messages.
"""

from __future__ import annotations

import logging

from .reporting import get_reporter

__all__ = ["ReporterHandler", "configure_logging", "get_logger", "step"]

# indexed by -v count, capped at the last entry
_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


class ReporterHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            text = self.format(record)
        except Exception:
            self.handleError(record)
            return
        get_reporter().message(record.levelno, text)


def get_logger() -> logging.Logger:
    return logging.getLogger("padder")


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """Attach a :class:`ReporterHandler` and set the level from ``-v``.

    Calling it again replaces the earlier handler.
    """
    logger = get_logger()
    logger.setLevel(_LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)])
    for handler in [h for h in logger.handlers if isinstance(h, ReporterHandler)]:
        logger.removeHandler(handler)
    handler = ReporterHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def step(message: str) -> None:
    """Announce a CLI step; shown at every verbosity."""
    get_reporter().status(f"-> {message}")
