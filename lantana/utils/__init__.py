"""
Utility modules for lantana.
"""

from lantana.utils.logger import (
    get_logger,
    setup_logging,
    LogLevel,
    JsonFormatter,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LogLevel",
    "JsonFormatter",
]
