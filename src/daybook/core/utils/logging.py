"""
Logging configuration using loguru.

The CLI calls setup_logging() once per invocation. Library code just
imports ``logger`` from loguru and logs; nothing is printed below WARNING
unless the user asks for it with ``-v``.
"""

import sys

from loguru import logger

_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG")


def level_for_verbosity(verbose: int, base_level: str = "WARNING") -> str:
    """Map a repeated ``-v`` count onto a loguru level name.

    ``base_level`` is used when ``verbose`` is 0, so a configured level
    still applies when no flag is given.
    """
    if verbose <= 0:
        return base_level
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "1 MB",
    retention: str = "14 days",
) -> None:
    """
    Configure loguru with a stderr sink and an optional file sink.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a log file. If None, only logs to stderr.
        fmt: Loguru format string for the stderr sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}",
            rotation=rotation,
            retention=retention,
        )
