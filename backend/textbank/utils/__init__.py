"""
Utility functions for textbank
"""

from .app_logger import configure_logging, configure_package_logging
from .language import get_language_name, normalize_language, parse_accept_language

__all__ = [
    "configure_logging",
    "configure_package_logging",
    "get_language_name",
    "normalize_language",
    "parse_accept_language",
]
