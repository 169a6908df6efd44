"""Centralized logging configuration for capflow.

Every module obtains its logger through :func:`get_logger`. Those loggers are
children of the package logger ``capflow`` and carry no handlers of their own;
one console handler on the package logger formats all records.

Levels used by the package:

* DEBUG: graph construction sizes and per-augmentation narration
  (``Augmentation 2: path 5 <- 4 <- 2 <- 0, bottleneck 4, total flow 16``).
* INFO: CLI progress such as solve timings.
* WARNING: a solve aborted by its augmentation budget.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

#: Name of the package logger every capflow logger descends from.
ROOT_LOGGER_NAME = "capflow"

#: Default record format for the console handler.
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger(); None until configured.
_handler: Optional[logging.Handler] = None


def _package_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """Install the console handler on the ``capflow`` logger.

    Only the first call has an effect; later calls return the installed
    handler unchanged until :func:`reset_logging` is called.

    Args:
        level: Level for the package logger.
        format_string: Record format; defaults to :data:`DEFAULT_FORMAT`.
        handler: Handler to install; defaults to a stdout ``StreamHandler``.

    Returns:
        The handler attached to the package logger.
    """
    global _handler

    if _handler is not None:
        return _handler

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger = _package_logger()
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # Records also reach the root logger, where pytest's caplog listens.
    package_logger.propagate = True

    _handler = handler
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``capflow`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its console handler."""
    handler = setup_root_logger()
    _package_logger().setLevel(level)
    handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show DEBUG records, including every augmenting path of a solve."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Go back to INFO, hiding augmentation narration."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Detach the console handler and forget the configuration (for tests)."""
    global _handler

    package_logger = _package_logger()
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = None
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
