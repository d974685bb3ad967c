"""
Language document tree.

A language document is an XML tree with a fixed preamble::

    <languages>
      <language name="English" id="en">
        <Errors>
          <Required>{0} is required</Required>
        </Errors>
      </language>
    </languages>

Everything below the ``language`` declaration node is keyed content. Siblings
are kept in ascending ordinal order by element name.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterator, Optional, Sequence

from textbank.exceptions import InvalidDocumentError
from textbank.utils.language import get_language_name

ROOT_TAG = "languages"
DECLARATION_TAG = "language"


def create_language_document(language: str) -> ET.ElementTree:
    """Fresh document holding only the declaration node for a language."""
    root = ET.Element(ROOT_TAG)
    ET.SubElement(
        root,
        DECLARATION_TAG,
        {"name": get_language_name(language), "id": language.lower()},
    )
    return ET.ElementTree(root)


def find_declaration(tree: ET.ElementTree) -> Optional[ET.Element]:
    root = tree.getroot()
    if root is None or root.tag != ROOT_TAG:
        return None
    declarations = [child for child in element_children(root) if child.tag == DECLARATION_TAG]
    if len(declarations) != 1:
        return None
    return declarations[0]


def get_declaration(tree: ET.ElementTree, path: str) -> ET.Element:
    """Declaration node of a loaded document; raises if the document has another shape."""
    declaration = find_declaration(tree)
    if declaration is None:
        root = tree.getroot()
        reason = (
            f"expected a single <{DECLARATION_TAG}> under <{ROOT_TAG}>"
            if root is not None and root.tag == ROOT_TAG
            else f"root element is not <{ROOT_TAG}>"
        )
        raise InvalidDocumentError(str(path), reason)
    return declaration


def element_children(node: ET.Element) -> Iterator[ET.Element]:
    """Child elements, skipping comments and processing instructions."""
    return (child for child in node if isinstance(child.tag, str))


def find_child(node: ET.Element, name: str) -> Optional[ET.Element]:
    # Not node.find(): segment names would be read as an ElementPath expression.
    for child in element_children(node):
        if child.tag == name:
            return child
    return None


def has_text(node: ET.Element) -> bool:
    return node.text is not None and node.text.strip() != ""


def has_children(node: ET.Element) -> bool:
    return next(element_children(node), None) is not None


def is_empty(node: ET.Element) -> bool:
    return not has_text(node) and not has_children(node)


def insert_child_ordered(parent: ET.Element, name: str) -> ET.Element:
    """
    Insert a new empty child so that sibling names stay in ordinal order.

    The child goes right before the first sibling whose name compares greater,
    or at the end when there is none.
    """
    child = ET.Element(name)
    for index, sibling in enumerate(parent):
        if isinstance(sibling.tag, str) and sibling.tag > name:
            parent.insert(index, child)
            return child
    parent.append(child)
    return child


def lookup_text(declaration: ET.Element, segments: Sequence[str]) -> Optional[str]:
    """Text of the leaf at the given path, or None when there is no leaf there."""
    node = declaration
    for segment in segments:
        node = find_child(node, segment)
        if node is None:
            return None
    if has_children(node) or not has_text(node):
        return None
    return node.text
