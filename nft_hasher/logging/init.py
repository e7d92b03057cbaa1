from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line written by the tool starts with one of the labels
DEBUG|INFO|WARN|ERROR|CRITICAL|SUMMARY followed by the message, on stdout.
The echoed CHIP-0007 JSON lines share that stream, so a log line and an echoed
object never interleave within one line.

Module loggers (`logging.getLogger(__name__)` under `nft_hasher.*`) propagate
into the application logger configured here.
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "log_summary",
    "set_debug",
    "reset_logging",
    "LabeledFormatter",
    "StdoutHandler",
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
]

LOGGER_NAME = "nft_hasher"

# SUMMARY sits between INFO=20 and WARNING=30 so it survives a WARN-only level
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter rendering `LABEL message`.

    WARNING is shortened to WARN; unknown levels fall back to their name.
    """

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


class StdoutHandler(logging.StreamHandler):
    """StreamHandler bound to whatever `sys.stdout` is at emit time.

    Same approach as the `logging.lastResort` stderr handler: the stream is
    looked up per record, so replacing `sys.stdout` (pytest capture, a
    redirected CLI run) never leaves the handler writing to a stale stream.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stdout


def setup_logging() -> logging.Logger:
    """Configure the `nft_hasher` logger once and return it.

    Later calls return the same logger until `reset_logging()`.
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    _remove_handlers(logger)

    handler = StdoutHandler(logging.INFO)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # No root propagation: each line is printed exactly once
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def set_debug() -> None:
    """Lower the application logger and its handlers to DEBUG (`--debug`).

    Per-row `row=<n> series_number=<k> hash=<digest>` lines become visible.
    """
    logger = get_logger()
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)
    logger.debug("debug mode enabled")


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def reset_logging() -> None:
    """Drop the configured handler and the global logger. Used by tests."""
    global _logger
    logger = logging.getLogger(LOGGER_NAME)
    _remove_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _logger = None
