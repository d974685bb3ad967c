"""
Fallback persistence.

When a key has no translation anywhere, the resolver asks the writer to record
the displayed fallback text in the language document, so translators get a list
of entries to fill in. Existing content is never overwritten.
"""

from __future__ import annotations

import logging
import os
import threading
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Sequence

from textbank.config.settings import TranslationSettings
from textbank.exceptions import PersistenceFailureError
from textbank.i18n.document import (
    create_language_document,
    find_child,
    get_declaration,
    has_text,
    insert_child_ordered,
    is_empty,
)
from textbank.i18n.keys import key_segments
from textbank.i18n.storage import DocumentStorage

logger = logging.getLogger(__name__)

_document_locks: Dict[str, threading.Lock] = {}
_registry_lock = threading.Lock()


def document_lock(path: Path) -> threading.Lock:
    """Process-wide lock guarding the read-modify-write of one document."""
    lock_key = os.path.normcase(os.path.abspath(os.fspath(path)))
    with _registry_lock:
        lock = _document_locks.get(lock_key)
        if lock is None:
            lock = _document_locks[lock_key] = threading.Lock()
        return lock


class FallbackWriter:
    def __init__(self, storage: DocumentStorage, settings: TranslationSettings) -> None:
        self._storage = storage
        self._settings = settings

    def ensure_fallback(self, language: str, key: str, text: str) -> bool:
        """
        Make sure the language document has a leaf for ``key``.

        Missing nodes along the key path are inserted in sibling order and the
        terminal one receives ``text``. The document is saved only if a leaf was
        added.

        Returns:
            True if the document was written, False if the key was already present

        Raises:
            InvalidDocumentError: the language file is not a language document
            PersistenceFailureError: the language file could not be read or written
        """
        segments = key_segments(key)
        path = self._settings.file_path_for(language)

        with document_lock(path):
            try:
                if not self._storage.exists(path):
                    self._create_language_file(language, path)
                tree = self._storage.load(path)
            except OSError as exc:
                raise PersistenceFailureError(str(path), str(exc)) from exc

            declaration = get_declaration(tree, str(path))
            if not self._place_fallback(declaration, segments, text):
                return False

            try:
                self._storage.save(tree, path)
            except OSError as exc:
                raise PersistenceFailureError(str(path), str(exc)) from exc

        logger.info("Added fallback translation %s to %s", "/" + "/".join(segments), path)
        return True

    def _place_fallback(self, declaration: ET.Element, segments: Sequence[str], text: str) -> bool:
        node = declaration
        last = len(segments) - 1

        for index, segment in enumerate(segments):
            child = find_child(node, segment)

            if child is None:
                node = insert_child_ordered(node, segment)
                continue

            if index == last:
                if self._settings.fill_empty_nodes and is_empty(child) and text.strip():
                    child.text = text
                    return True
                return False

            # A leaf cannot also hold children.
            if has_text(child):
                logger.warning(
                    "Skipping fallback for %s: '%s' already holds a translation",
                    "/" + "/".join(segments),
                    segment,
                )
                return False

            node = child

        node.text = text
        return True

    def _create_language_file(self, language: str, path: Path) -> None:
        self._storage.create_directory(path.parent)
        self._storage.save(create_language_document(language), path)
        logger.info("Created language file %s", path)
