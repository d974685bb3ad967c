from __future__ import annotations

import logging
import re
import string
from typing import Any, Callable, Optional, Sequence

from textbank.exceptions import (
    FormatMismatchError,
    InvalidArgumentError,
    PersistenceFailureError,
)
from textbank.i18n.context import get_language
from textbank.i18n.fallback_writer import FallbackWriter
from textbank.i18n.keys import normalize_key
from textbank.i18n.store import TranslationStore
from textbank.interfaces.translator import TranslatorInterface

logger = logging.getLogger(__name__)

MISSING_ARGS_TEMPLATE = "[Missing format args for '{text}' text in '{language}' language]"

_FORMATTER = string.Formatter()
_INDEX_PATTERN = re.compile(r"[0-9]+")


def format_text(text: str, args: Sequence[Any]) -> str:
    """
    Fill positional placeholders ("{0} is required") with ``args``.

    Only bare argument indexes are allowed, optionally with a conversion or a
    format spec ("{0!r}", "{1:>8}"). Attribute and item access ("{0.attr}",
    "{0[key]}"), automatic numbering ("{}") and nested fields are rejected, since
    the texts come from hand-edited language files.

    Raises:
        FormatMismatchError: the placeholders do not fit the arguments
    """
    try:
        args = tuple(args)
        for _, field_name, format_spec, _ in _FORMATTER.parse(text):
            if field_name is None:
                continue
            if not _INDEX_PATTERN.fullmatch(field_name):
                raise FormatMismatchError(text, args, reason=f"unsupported placeholder {{{field_name}}}")
            if format_spec and "{" in format_spec:
                raise FormatMismatchError(text, args, reason="nested placeholders are not supported")
        return text.format(*args)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError) as exc:
        raise FormatMismatchError(text, args, reason=str(exc)) from exc


class Translator(TranslatorInterface):
    """
    Resolves UI text by key and language.

    A missing translation falls back to the reference language; if that is
    missing too, the fallback text (or "[/The/Key]") is recorded in the reference
    language's document and returned.
    """

    def __init__(
        self,
        store: TranslationStore,
        writer: FallbackWriter,
        *,
        reference_language: str = "en",
        language_provider: Optional[Callable[[], str]] = None,
    ) -> None:
        self._store = store
        self._writer = writer
        self._reference_language = reference_language
        self._language_provider = language_provider or get_language

    @property
    def current_language(self) -> str:
        return self._language_provider()

    @property
    def reference_language(self) -> str:
        return self._reference_language

    def text(
        self,
        key: str,
        fallback: Optional[str] = None,
        args: Optional[Sequence[Any]] = None,
    ) -> str:
        return self._resolve(self.current_language, key, fallback, args)

    def text_in(
        self,
        language: str,
        key: str,
        fallback: Optional[str] = None,
        args: Optional[Sequence[Any]] = None,
    ) -> str:
        return self._resolve(language, key, fallback, args)

    def _resolve(
        self,
        language: str,
        key: str,
        fallback: Optional[str],
        args: Optional[Sequence[Any]],
    ) -> str:
        if not language or not str(language).strip():
            raise InvalidArgumentError("language", language)
        if not key or not str(key).strip():
            raise InvalidArgumentError("key", key)

        language = str(language).strip()
        if self._is_reference_language(language):
            language = self._reference_language
        key = normalize_key(key)

        translated = self._store.lookup(language, key)

        if translated is None:
            if fallback is None:
                fallback = f"[{key}]"

            if not self._is_reference_language(language):
                return self._resolve(self._reference_language, key, fallback, args)

            self._persist_fallback(language, key, fallback)
            translated = fallback

        if args:
            return self._format_safe(language, translated, args)

        return translated

    def _is_reference_language(self, language: str) -> bool:
        return language.lower() == self._reference_language.lower()

    def _persist_fallback(self, language: str, key: str, fallback: str) -> None:
        try:
            self._writer.ensure_fallback(language, key, fallback)
        except PersistenceFailureError as exc:
            # The miss is retried on the next lookup of the same key.
            logger.warning("Fallback for %s not persisted: %s", key, exc)

    def _format_safe(self, language: str, text: str, args: Sequence[Any]) -> str:
        if isinstance(args, (str, bytes)):
            args = (args,)
        try:
            return format_text(text, args)
        except FormatMismatchError as exc:
            logger.warning("%s (language=%s): %s", exc, language, exc.details.get("reason"))
            return MISSING_ARGS_TEMPLATE.format(text=text, language=language)
