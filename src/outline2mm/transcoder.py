"""Outline notation to Freemind mind-map transcoding."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from outline2mm.config import MINDMAP_ROOT_TEXT, OUTLINE_END_MARKER, OUTLINE_START_MARKER
from outline2mm.freemind import serialize_freemind
from outline2mm.outline_parser import count_nodes, outline_to_markdown, parse_outline
from outline2mm.schemas import OutlineNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineToMindMapTranscoder:
    """Parse outline notation and serialize it as a Freemind document.

    Attributes:
        start_marker: Line that opens the notation block.
        end_marker: Line that closes the notation block.
        root_text: Label of the top-level mind-map node.
    """

    start_marker: str = OUTLINE_START_MARKER
    end_marker: str = OUTLINE_END_MARKER
    root_text: str = MINDMAP_ROOT_TEXT

    def parse(self, outline: str) -> OutlineNode:
        """Parse ``outline`` into a tree under a synthetic root."""
        return parse_outline(outline, start_marker=self.start_marker, end_marker=self.end_marker)

    def serialize(self, root: OutlineNode) -> str:
        """Serialize the tree under ``root`` as Freemind XML."""
        return serialize_freemind(root, root_text=self.root_text)

    def transcode(self, outline: str) -> str:
        """Parse ``outline`` and return the Freemind XML for it."""
        root = self.parse(outline)
        logger.debug("Parsed outline into %d nodes", count_nodes(root))
        return self.serialize(root)

    def to_markdown(self, outline: str) -> str:
        """Render ``outline`` as Markdown headings."""
        return outline_to_markdown(outline, start_marker=self.start_marker, end_marker=self.end_marker)
