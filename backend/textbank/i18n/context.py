from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

from textbank.config.settings import get_settings
from textbank.utils.language import normalize_language

_LANGUAGE: ContextVar[Optional[str]] = ContextVar("textbank_language", default=None)


def _default_language() -> str:
    return get_settings().translations.default_language


def set_language(lang: Optional[str]) -> Token:
    return _LANGUAGE.set(normalize_language(lang, default=_default_language()))


def reset_language(token: Token) -> None:
    _LANGUAGE.reset(token)


def get_language() -> str:
    return _LANGUAGE.get() or _default_language()


@contextmanager
def language_scope(lang: Optional[str]) -> Iterator[str]:
    """Run a block with ``lang`` as the active language."""
    token = set_language(lang)
    try:
        yield get_language()
    finally:
        reset_language(token)
