"""Logging setup for molfile.

The library never configures logging on import. Applications (or tests)
call ``setup_logging`` once; modules obtain loggers through ``get_logger``
so that every logger lives under the ``molfile`` namespace.
"""

import logging
import os

PACKAGE_LOGGER_NAME = "molfile"
LOG_LEVEL_ENV_VAR = "MOLFILE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_ATTR = "_molfile_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the molfile namespace.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger whose name is prefixed with ``molfile`` when it is not already
    """
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def _resolve_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        level = logging.getLevelName(env_level.strip().upper())
        if isinstance(level, int):
            return level
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure the package logger.

    Level resolution order:
    1. ``verbose`` -> DEBUG
    2. ``quiet`` -> WARNING
    3. ``MOLFILE_LOG_LEVEL`` environment variable
    4. INFO

    Calling this more than once only updates the level; a single stream
    handler is attached.

    Args:
        verbose: Enable debug output
        quiet: Only show warnings and errors

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    level = _resolve_level(verbose, quiet)
    logger.setLevel(level)

    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    handler.setLevel(level)

    return logger
