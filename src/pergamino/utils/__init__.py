"""Utility modules for Pergamino.

Provides:
- text: escape_html for attribute values
- logger: get_logger for logging
"""

from pergamino.utils.logger import get_logger
from pergamino.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
