"""
Unified configuration access point

    from textbank.config import get_settings

    root = get_settings().translations.root_folder
"""

from .settings import (
    ApplicationSettings,
    TranslationSettings,
    get_settings,
    reload_settings,
)

__all__ = [
    "ApplicationSettings",
    "TranslationSettings",
    "get_settings",
    "reload_settings",
]
