"""Utility modules for lessonmark.

Provides:
- logger: get_logger, namespaced under "lessonmark"
"""

from lessonmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
