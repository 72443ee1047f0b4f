"""Centralized logging configuration for handlegraph.

All package loggers hang off the ``"handlegraph"`` logger. The package only
emits DEBUG diagnostics (rejected edges, cascaded removals, per-call search
summaries), so the root sits at WARNING and stays quiet until a caller turns
debugging on, either globally or for a block with `debug_logging()`.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

ROOT_LOGGER_NAME = "handlegraph"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Flag to track if we've already set up the package logger
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.WARNING,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root handlegraph logger with a single handler.

    Repeated calls are no-ops until `reset_logging()` is called.

    Args:
        level: Logging level (default: WARNING).
        handler: Custom handler (optional, defaults to StreamHandler on
            stderr). Its formatter is replaced by `LOG_FORMAT`.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the handlegraph configuration.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance with level NOTSET, so the package root decides.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all handlegraph loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.WARNING).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


@contextmanager
def debug_logging() -> Iterator[logging.Logger]:
    """Emit handlegraph DEBUG records inside a ``with`` block.

    The root logger and its handlers get their previous levels back on exit,
    even when the block raises.

    Example:
        >>> with debug_logging():
        ...     dist = shortest_paths(graph, 0)  # logs the search summary
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved: List[Tuple[Any, int]] = [(root_logger, root_logger.level)]
    saved.extend((handler, handler.level) for handler in root_logger.handlers)
    set_global_log_level(logging.DEBUG)
    try:
        yield root_logger
    finally:
        for target, level in saved:
            target.setLevel(level)


def debug_lazy(logger: logging.Logger, msg: str, *args: Any) -> None:
    """Log ``msg`` at DEBUG, deferring the work of computing its arguments.

    Callable arguments are invoked with no arguments and their results used
    for formatting, but only when DEBUG is enabled for ``logger``. Summaries
    that need a pass over a large table therefore cost nothing when the
    package is not being debugged.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    values = tuple(arg() if callable(arg) else arg for arg in args)
    logger.debug(msg, *values, stacklevel=2)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
