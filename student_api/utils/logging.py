"""
Logging utilities for the Student Registry backend.

Privacy rules for log lines:
- NEVER log student email addresses
- NEVER log the MongoDB connection string (it may carry credentials)

Acceptable logging:
- High-level events (e.g., "Student registered", "Mongo client closed")
- Generated record ids and collection names
"""

import logging
from typing import Optional

from student_api.config import settings


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from student_api.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Student registered")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)

    return logger
