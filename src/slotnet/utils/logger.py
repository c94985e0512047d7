"""
Logging setup for slotnet.

Every module grabs its own bound logger with ``get_logger(__name__)``;
``configure_logging`` is called once by the entry point to install sinks.
"""

import sys

from loguru import logger

from slotnet.models.enums import LogLevel

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

# Loguru has no "FULL" level, it maps to TRACE with backtraces enabled
_LEVEL_MAP = {
    LogLevel.FULL: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
}


def configure_logging(level: LogLevel = LogLevel.INFO, log_file: str = "") -> None:
    """
    Replace all loguru sinks with a stderr sink at the given level.

    Args:
        level: Verbosity level
        log_file: Optional path of an additional file sink (empty = console only)
    """
    loguru_level = _LEVEL_MAP[LogLevel(level)]
    full = level == LogLevel.FULL

    # Records logged without get_logger() still need extra[name] for LOG_FORMAT
    logger.configure(extra={"name": "slotnet"})
    logger.remove()
    logger.add(
        sys.stderr,
        level=loguru_level,
        format=LOG_FORMAT,
        backtrace=full,
        diagnose=full,
    )
    if log_file:
        logger.add(
            log_file,
            level=loguru_level,
            format=LOG_FORMAT,
            rotation="10 MB",
            backtrace=full,
            diagnose=full,
        )


def get_logger(name: str):
    """Get a logger bound to a module name."""
    return logger.bind(name=name)
