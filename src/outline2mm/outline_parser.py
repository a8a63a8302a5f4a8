"""Parse outline notation and Markdown headings into an outline tree."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from outline2mm.config import OUTLINE_END_MARKER, OUTLINE_START_MARKER
from outline2mm.schemas import OutlineNode

_OUTLINE_HEADING_RE = re.compile(r"^(\++)\s*(.*)$")
_MARKDOWN_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*?)\s*$")
_MAX_MARKDOWN_LEVEL = 6


def parse_outline(
    outline: str,
    *,
    start_marker: str = OUTLINE_START_MARKER,
    end_marker: str = OUTLINE_END_MARKER,
) -> OutlineNode:
    """Build an outline tree from ``+``-prefixed outline notation.

    Heading depth is the number of leading ``+`` characters. Marker lines are
    dropped, and when the text has a start marker only the lines between a
    start marker and the next end marker are read. Lines without a leading
    ``+`` are skipped.

    A heading is attached under the nearest preceding open heading with a
    smaller level, so ``+A`` followed by ``+++C`` makes ``C`` a child of ``A``.

    Args:
        outline: Outline notation text.
        start_marker: Line that opens the notation block.
        end_marker: Line that closes the notation block.

    Returns:
        The synthetic root node (level 0) holding the top-level headings.
    """
    return _build_tree(_iter_outline_headings(outline, start_marker, end_marker))


def parse_markdown_headings(markdown: str) -> OutlineNode:
    """Build an outline tree from ATX Markdown headings (``#`` to ``######``)."""
    return _build_tree(_iter_markdown_headings(markdown))


def outline_to_markdown(
    outline: str,
    *,
    start_marker: str = OUTLINE_START_MARKER,
    end_marker: str = OUTLINE_END_MARKER,
) -> str:
    """Convert outline notation into Markdown headings, one per line."""
    root = parse_outline(outline, start_marker=start_marker, end_marker=end_marker)
    return render_markdown(root)


def render_markdown(root: OutlineNode) -> str:
    """Render every heading below ``root`` as a Markdown heading."""
    lines = []
    for node in iter_nodes(root):
        heading_prefix = "#" * min(node.level, _MAX_MARKDOWN_LEVEL)
        lines.append(f"{heading_prefix} {node.text}")
    return "\n".join(lines)


def iter_nodes(root: OutlineNode) -> Iterator[OutlineNode]:
    """Yield the nodes below ``root`` in document (pre-)order."""
    pending = list(reversed(root.children))
    while pending:
        node = pending.pop()
        yield node
        pending.extend(reversed(node.children))


def count_nodes(root: OutlineNode) -> int:
    """Count headings in the tree, excluding the root."""
    return sum(1 for _ in iter_nodes(root))


def _iter_outline_headings(
    outline: str, start_marker: str, end_marker: str
) -> Iterator[tuple[int, str]]:
    lines = [line.strip() for line in (outline or "").splitlines()]
    inside = start_marker not in lines

    for line in lines:
        if line == start_marker:
            inside = True
            continue
        if line == end_marker:
            inside = False
            continue
        if not inside or not line:
            continue
        match = _OUTLINE_HEADING_RE.match(line)
        if not match:
            continue
        yield len(match.group(1)), match.group(2).strip()


def _iter_markdown_headings(markdown: str) -> Iterator[tuple[int, str]]:
    for line in (markdown or "").splitlines():
        match = _MARKDOWN_HEADING_RE.match(line.strip())
        if match:
            yield len(match.group(1)), match.group(2)


def _build_tree(headings: Iterable[tuple[int, str]]) -> OutlineNode:
    root = OutlineNode(level=0)
    # Most recent node per level, deepest last.
    stack: list[OutlineNode] = []

    for level, text in headings:
        node = OutlineNode(level=level, text=text)

        while stack and stack[-1].level >= level:
            stack.pop()

        parent = stack[-1] if stack else root
        parent.children.append(node)
        stack.append(node)

    return root
