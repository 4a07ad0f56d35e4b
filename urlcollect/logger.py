# === FILE: urlcollect/logger.py ===
"""Logging configuration for the **urlcollect** application logger.

Highlights
----------
* One named logger, :data:`LOGGER_NAME`, used by the fetcher and collector
  unless a different :class:`logging.Logger` is injected.
* Nothing is configured at import time. The embedding application calls
  :func:`configure` once on startup, e.g.::

      from urlcollect.logger import configure
      configure(level="DEBUG")
* Console output plus optional rotating file output.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

LOGGER_NAME: Final[str] = "urlcollect"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LevelT = Union[int, str]


# --------------------------------------------------------------------------- #
# Helper builders                                                             #
# --------------------------------------------------------------------------- #


def _stdout_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def get_logger() -> logging.Logger:
    """Return the application logger (configured or not)."""
    return logging.getLogger(LOGGER_NAME)


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the application logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console-only output.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – close and remove existing handlers; *False* – append.
    """
    lg = get_logger()
    lg.setLevel(level)

    if replace_handlers:
        shutdown()

    lg.addHandler(_stdout_handler(log_format))

    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))

    lg.propagate = False
    return lg


def shutdown() -> None:
    """Flush, close and detach every handler of the application logger."""
    lg = get_logger()
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()


__all__ = ["LOGGER_NAME", "DEFAULT_FORMAT", "get_logger", "configure", "shutdown"]
