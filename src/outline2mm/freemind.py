"""Serialize outline trees to Freemind (.mm) mind-map XML."""

from __future__ import annotations

import re

from lxml import etree

from outline2mm.config import FREEMIND_VERSION, MINDMAP_ROOT_TEXT
from outline2mm.exceptions import OutlineStructureError
from outline2mm.schemas import OutlineNode

# Characters outside the XML 1.0 Char production.
_INVALID_XML_CHARS_RE = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def serialize_freemind(
    root: OutlineNode,
    *,
    root_text: str = MINDMAP_ROOT_TEXT,
    version: str = FREEMIND_VERSION,
    pretty_print: bool = True,
) -> str:
    """Serialize an outline tree into a Freemind ``<map>`` document.

    The synthetic root becomes a single ``<node>`` labelled ``root_text``;
    every heading below it becomes a nested ``<node TEXT="...">``. Attribute
    escaping is left to lxml, and characters XML cannot carry are dropped.

    Args:
        root: Root of the tree returned by one of the outline parsers.
        root_text: Label of the top-level mind-map node.
        version: Freemind file format version written on ``<map>``.
        pretty_print: Indent nested nodes.

    Returns:
        The XML document as text.

    Raises:
        OutlineStructureError: If a node is reachable more than once.
    """
    map_element = etree.Element("map", version=version)
    root_element = etree.SubElement(map_element, "node", TEXT=_clean_text(root_text))

    seen = {id(root)}
    pending = [(root_element, child) for child in reversed(root.children)]
    while pending:
        parent_element, node = pending.pop()
        if id(node) in seen:
            raise OutlineStructureError(
                f"Outline node {node.text!r} appears more than once in the tree"
            )
        seen.add(id(node))

        element = etree.SubElement(parent_element, "node", TEXT=_clean_text(node.text))
        pending.extend((element, child) for child in reversed(node.children))

    return etree.tostring(map_element, encoding="unicode", pretty_print=pretty_print)


def _clean_text(text: str) -> str:
    return _INVALID_XML_CHARS_RE.sub("", text)
