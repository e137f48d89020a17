"""Logger configuration for revchain."""

import sys

from loguru import logger


def setup_logger(level: str = "INFO", serialize: bool = False) -> None:
    """Configure the loguru logger with a single stderr sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        serialize: Emit JSON lines instead of the colored console format.
    """
    logger.remove()

    if serialize:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> {extra}",
            level=level,
            colorize=True,
        )

    logger.debug("Logger initialized", level=level)
