"""
Document storage for language files.

``DocumentStorage`` is the contract the translator needs from durable storage;
``FileDocumentStorage`` keeps one XML file per language on the local disk.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
import threading
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from textbank.exceptions import InvalidDocumentError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

XML_DECLARATION = b"<?xml version='1.0' encoding='utf-8' standalone='yes'?>\n"

_umask_lock = threading.Lock()


def _new_file_mode() -> int:
    """Permission bits a plain open() would give a new file under the process umask."""
    # os.umask can only be read by setting it.
    with _umask_lock:
        mask = os.umask(0o077)
        os.umask(mask)
    return 0o666 & ~mask


class DocumentStorage(ABC):
    """Load/save access to language documents."""

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        raise NotImplementedError

    @abstractmethod
    def create_directory(self, path: PathLike) -> None:
        """Create a directory and its parents; succeeds if it already exists."""
        raise NotImplementedError

    @abstractmethod
    def load(self, path: PathLike) -> ET.ElementTree:
        """
        Load a document.

        Raises:
            InvalidDocumentError: the stored content is not well-formed XML
            OSError: the document could not be read
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, tree: ET.ElementTree, path: PathLike) -> None:
        """
        Replace the stored document with ``tree`` in full.

        Raises:
            OSError: the document could not be written
        """
        raise NotImplementedError


class FileDocumentStorage(DocumentStorage):
    """
    Local file storage for language documents.

    Comments and processing instructions are kept on load so a rewrite does not
    drop translator notes. Saves go to a temporary file in the target directory
    which then replaces the target, so readers never see a half-written document.
    """

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def create_directory(self, path: PathLike) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def load(self, path: PathLike) -> ET.ElementTree:
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True, insert_pis=True))
        try:
            return ET.parse(os.fspath(path), parser=parser)
        except ET.ParseError as exc:
            raise InvalidDocumentError(os.fspath(path), f"malformed XML ({exc})") from exc

    def save(self, tree: ET.ElementTree, path: PathLike) -> None:
        target = Path(path)
        if target.exists():
            mode = stat.S_IMODE(target.stat().st_mode) | stat.S_IWUSR
            # Read-only language files are still ours to update.
            os.chmod(target, mode)
        else:
            mode = _new_file_mode()

        ET.indent(tree, space=self._indent)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=os.fspath(target.parent)
        )
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(XML_DECLARATION)
                tree.write(fh, encoding="utf-8", xml_declaration=False)
                fh.write(b"\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, target)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

        logger.debug("Saved language document %s", target)
