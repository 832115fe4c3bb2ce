"""Project-wide logging for colwise.

A single ``colwise`` logger writes to stdout. Modules ask for a child logger
with :func:`get_logger` so records carry the module name while sharing the
parent's handler.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "get_logger", "is_console_handler"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{name}'.")
    return resolved


def is_console_handler(handler: logging.Handler) -> bool:
    """True for the plain console handler attached by :func:`setup_logger`.

    File and capture handlers subclass ``StreamHandler`` and are not counted.
    """
    return type(handler) is logging.StreamHandler


def setup_logger(
    name: str = "colwise",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the stdout logger called ``name``.

    Args:
        name: Logger name, ``colwise`` for the project root logger
        level: Log level name; falls back to ``LOG_LEVEL`` then INFO
        format_string: Custom record format

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the level name is not a logging level.
    """
    resolved = _resolve_level(level)
    log = logging.getLogger(name)

    if not any(is_console_handler(h) for h in log.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        log.addHandler(handler)
        log.setLevel(resolved)
        log.propagate = False
    elif level is not None:
        log.setLevel(resolved)

    return log


def get_logger(module: str) -> logging.Logger:
    """Child of the project logger, e.g. ``colwise.loops`` for ``"loops"``."""
    return logger.getChild(module.rsplit(".", 1)[-1])


logger = setup_logger()
