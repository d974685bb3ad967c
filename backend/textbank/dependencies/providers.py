"""
Service providers for dependency injection

FastAPI Depends() compatible functions building the translator from the
centralized settings.
"""

from typing import Annotated, Callable, Optional

from fastapi import Depends

from textbank.config.settings import ApplicationSettings, get_settings
from textbank.i18n.fallback_writer import FallbackWriter
from textbank.i18n.storage import DocumentStorage, FileDocumentStorage
from textbank.i18n.store import TranslationStore
from textbank.i18n.translator import Translator
from textbank.utils.app_logger import configure_package_logging


def create_translator(
    settings: Optional[ApplicationSettings] = None,
    *,
    storage: Optional[DocumentStorage] = None,
    language_provider: Optional[Callable[[], str]] = None,
) -> Translator:
    """
    Build a translator wired to the configured language files.

    Also applies the log level settings to the textbank loggers.

    Args:
        settings: Application settings (global settings if omitted)
        storage: Document storage (local XML files if omitted)
        language_provider: Source of the active language (request context if omitted)

    Returns:
        Translator instance
    """
    settings = settings or get_settings()
    configure_package_logging(settings)
    storage = storage or FileDocumentStorage()
    translations = settings.translations

    return Translator(
        TranslationStore(storage, translations),
        FallbackWriter(storage, translations),
        reference_language=translations.reference_language,
        language_provider=language_provider,
    )


def get_translator(
    settings: ApplicationSettings = Depends(get_settings),
) -> Translator:
    """
    FastAPI dependency to get a Translator

    Translators hold no per-document state (document locks are process-wide),
    so a fresh one per request is fine.
    """
    return create_translator(settings)


TranslatorDep = Annotated[Translator, Depends(get_translator)]
