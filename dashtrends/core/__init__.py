"""
Core Infrastructure - Logging

Usage:
    from dashtrends.core import get_logger, setup_logging

    setup_logging(level="DEBUG")
    logger = get_logger(__name__)
"""

from .logging_config import JSONFormatter, get_logger, log_with_context, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "log_with_context",
    "JSONFormatter",
]
