from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request

from textbank.i18n.context import reset_language, set_language
from textbank.utils.language import parse_accept_language


def get_request_language(request: Request, default: Optional[str] = None) -> Optional[str]:
    """
    Preferred language of a request.

    An explicit ``?lang=`` / ``?language=`` query parameter beats the
    Accept-Language header. Returns ``default`` when the request expresses no
    preference.
    """
    query_lang = request.query_params.get("lang") or request.query_params.get("language")
    if query_lang and query_lang.strip():
        return query_lang.strip()

    candidates = parse_accept_language(request.headers.get("Accept-Language", ""))
    if candidates:
        return candidates[0]

    return default


def install_language_middleware(app: FastAPI, *, default_language: Optional[str] = None) -> None:
    """
    Install request-scoped language selection.

    Handlers (and anything they call) see the request language through
    ``textbank.i18n.get_language``, which is what ``Translator.text`` uses.
    """

    @app.middleware("http")
    async def _language_middleware(request: Request, call_next):
        token = set_language(get_request_language(request, default_language))
        try:
            return await call_next(request)
        finally:
            reset_language(token)
