"""
Translation resolution with persisted fallbacks.

- Keys are slash-delimited paths into one XML document per language
- Misses fall back to the reference language
- Total misses are written into the reference language's document for translators
- Request-scoped language via ContextVar (set by middleware)
"""

from .context import get_language, language_scope, reset_language, set_language
from .fallback_writer import FallbackWriter
from .keys import key_segments, normalize_key
from .storage import DocumentStorage, FileDocumentStorage
from .store import TranslationStore
from .translator import Translator, format_text

__all__ = [
    "get_language",
    "set_language",
    "reset_language",
    "language_scope",
    "normalize_key",
    "key_segments",
    "DocumentStorage",
    "FileDocumentStorage",
    "TranslationStore",
    "FallbackWriter",
    "Translator",
    "format_text",
]
