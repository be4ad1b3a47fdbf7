"""
Logging Setup.

Applies the ``logging`` section of a ServiceConfig to the package logger.
"""

from __future__ import annotations

import logging
from typing import Union

from directory_pager.config.models import LoggingConfig, ServiceConfig

PACKAGE_LOGGER = "directory_pager"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format: str = LoggingConfig().format,
) -> None:
    """
    Configure logging for Directory Pager.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level, as a number or name (default: INFO)
        format: Log message format

    Example:
        >>> import directory_pager
        >>> directory_pager.configure_logging(logging.DEBUG)
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def configure_logging_from(config: ServiceConfig) -> None:
    """Apply ``config.logging`` (level and format)."""
    configure_logging(config.logging.level, config.logging.format)
