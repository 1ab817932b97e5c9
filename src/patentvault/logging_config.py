"""Logging setup."""

import sys

from loguru import logger


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Replace loguru's default sink with stderr at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else level.upper(),
        backtrace=debug,
        diagnose=debug,
    )
