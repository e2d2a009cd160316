"""Utility modules for prepis.

Provides:
- logger: get_logger for logging
"""

from prepis.utils.logger import get_logger

__all__ = [
    "get_logger",
]
