"""
Translation key handling.

Keys are slash-delimited paths ("Errors/Required"). The normalized form always
starts with "/" ("/Errors/Required"); its non-empty segments name the nested
elements of a language document.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import List

from textbank.exceptions import InvalidArgumentError

KEY_SEPARATOR = "/"

# XML 1.0 NameStartChar / NameChar, without ':' (no namespaces).
_NAME_START_CHARS = (
    "A-Z_a-z"
    "\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u02FF\u0370-\u037D\u037F-\u1FFF"
    "\u200C-\u200D\u2070-\u218F\u2C00-\u2FEF\u3001-\uD7FF\uF900-\uFDCF"
    "\uFDF0-\uFFFD\U00010000-\U000EFFFF"
)
_NAME_CHARS = _NAME_START_CHARS + "\\-.0-9\u00B7\u0300-\u036F\u203F-\u2040"
_SEGMENT_PATTERN = re.compile(f"[{_NAME_START_CHARS}][{_NAME_CHARS}]*")


def _is_element_name(segment: str) -> bool:
    if not _SEGMENT_PATTERN.fullmatch(segment):
        return False
    # expat's name tables are older than the ranges above; it has the last word.
    try:
        return ET.fromstring(f"<{segment}/>").tag == segment
    except ET.ParseError:
        return False


def normalize_key(key: str) -> str:
    """Give the key a leading '/' if it does not have one."""
    if not key or not str(key).strip():
        raise InvalidArgumentError("key", key)
    key = str(key)
    return key if key.startswith(KEY_SEPARATOR) else KEY_SEPARATOR + key


def key_segments(key: str) -> List[str]:
    """
    Split a key into its path segments.

    Empty segments are dropped, so "Errors//Required/" and "/Errors/Required" are
    the same path. A key without any segment, or with a segment that cannot be
    written and read back as an XML element name, is rejected.
    """
    segments = [segment for segment in normalize_key(key).split(KEY_SEPARATOR) if segment]
    if not segments:
        raise InvalidArgumentError("key", key)
    for segment in segments:
        if not _is_element_name(segment):
            raise InvalidArgumentError("key", key)
    return segments
