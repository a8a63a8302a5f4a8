"""outline2mm: keyword extraction and outline to mind-map conversion."""

from outline2mm.exceptions import ConversionError, Outline2mmError, OutlineStructureError
from outline2mm.freemind import serialize_freemind
from outline2mm.keywords import KeywordExtractor, extract_keywords
from outline2mm.outline_parser import (
    count_nodes,
    outline_to_markdown,
    parse_markdown_headings,
    parse_outline,
)
from outline2mm.prompts import build_keyword_messages, build_keyword_prompt
from outline2mm.schemas import OutlineNode
from outline2mm.transcoder import OutlineToMindMapTranscoder

__all__ = [
    "ConversionError",
    "KeywordExtractor",
    "Outline2mmError",
    "OutlineNode",
    "OutlineStructureError",
    "OutlineToMindMapTranscoder",
    "build_keyword_messages",
    "build_keyword_prompt",
    "count_nodes",
    "extract_keywords",
    "outline_to_markdown",
    "parse_markdown_headings",
    "parse_outline",
    "serialize_freemind",
]
