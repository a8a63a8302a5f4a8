"""Build mind-map downloads and Markdown previews from outline notation."""

from __future__ import annotations

from outline2mm.outline_parser import count_nodes, render_markdown
from outline2mm.transcoder import OutlineToMindMapTranscoder
from outline2mm.utils.logging_config import get_logger
from server.models import MarkdownResponse

logger = get_logger(__name__)

_transcoder = OutlineToMindMapTranscoder()


def build_mindmap_file(outline: str) -> bytes:
    """Return the Freemind document for ``outline`` as UTF-8 bytes."""
    root = _transcoder.parse(outline)
    content = _transcoder.serialize(root).encode("utf-8")
    logger.info(
        "Mind map generated",
        extra={"nodes": count_nodes(root), "size_bytes": len(content)},
    )
    return content


def build_markdown_preview(outline: str) -> MarkdownResponse:
    """Render ``outline`` as Markdown headings."""
    root = _transcoder.parse(outline)
    return MarkdownResponse(markdown=render_markdown(root), nodes=count_nodes(root))
