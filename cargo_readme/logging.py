"""Diagnostics for cargo-readme runs.

stdout carries the rendered README, so everything here goes to stderr or to a
log file.
"""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "cargo_readme"
_CONSOLE_FORMAT = "[cargo-readme] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child of the `cargo_readme` logger."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Attach the stderr handler and, when `log_file` is given, a file handler.

    The console shows warnings unless `verbose` is set. A log file always
    records the full debug trace of the run.
    """
    logger = logging.getLogger(_ROOT)
    logger.propagate = False
    _drop_handlers(logger)

    console_level = logging.DEBUG if verbose else logging.WARNING
    logger.addHandler(_handler(logging.StreamHandler(), console_level, _CONSOLE_FORMAT))
    if log_file is None:
        logger.setLevel(console_level)
        return logger

    logger.addHandler(
        _handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, _FILE_FORMAT)
    )
    logger.setLevel(logging.DEBUG)
    return logger


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _drop_handlers(logger: logging.Logger) -> None:
    # the CLI may run several times in one process (tests)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["configure_logging", "get_logger"]
