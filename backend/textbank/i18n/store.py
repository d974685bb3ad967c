from __future__ import annotations

import logging
from typing import Optional

from textbank.config.settings import TranslationSettings
from textbank.exceptions import InvalidDocumentError
from textbank.i18n.document import find_declaration, lookup_text
from textbank.i18n.keys import key_segments
from textbank.i18n.storage import DocumentStorage

logger = logging.getLogger(__name__)


class TranslationStore:
    """
    Read side of the language documents.

    Every lookup loads the document afresh; nothing is cached between calls and
    no document is ever created here. Writers replace files atomically, so reads
    need no lock.
    """

    def __init__(self, storage: DocumentStorage, settings: TranslationSettings) -> None:
        self._storage = storage
        self._settings = settings

    def lookup(self, language: str, key: str) -> Optional[str]:
        """Stored translation for a key, or None if the language has no leaf there."""
        segments = key_segments(key)
        path = self._settings.file_path_for(language)

        if not self._storage.exists(path):
            return None

        try:
            tree = self._storage.load(path)
        except (InvalidDocumentError, OSError) as exc:
            logger.warning("Cannot read language file %s: %s", path, exc)
            return None

        declaration = find_declaration(tree)
        if declaration is None:
            logger.warning("Language file %s has no <language> declaration", path)
            return None

        return lookup_text(declaration, segments)
