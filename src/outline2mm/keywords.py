"""Extract keyword lists from free-form language-model output."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Opening fence may carry a language tag (```json); both fences are dropped.
_FENCE_RE = re.compile(r"```(?:[\w+-]*[ \t]*\n)?([\s\S]*?)\n?```")
_SPLIT_RE = re.compile(r"[,\n]")
# Leftovers of a malformed JSON array.
_JSON_PUNCTUATION = ('"', "[", "]")


@dataclass(frozen=True)
class KeywordExtractor:
    """Turn a model completion into an ordered list of keywords.

    The model may answer with a clean JSON array, a fenced code block around
    one, or a plain comma/newline separated list. Extraction never raises: an
    answer that cannot be read yields an empty list.

    Attributes:
        deduplicate: If True, drop repeated keywords keeping the first
            occurrence.
    """

    deduplicate: bool = False

    def extract(self, raw_text: str | None) -> list[str]:
        """Extract keywords from ``raw_text``."""
        if not raw_text:
            return []

        cleaned = strip_code_fences(raw_text)
        keywords = _parse_json_array(cleaned)
        if not keywords:
            keywords = _split_fragments(cleaned)

        if self.deduplicate:
            keywords = list(dict.fromkeys(keywords))
        return keywords


def extract_keywords(raw_text: str | None, *, deduplicate: bool = False) -> list[str]:
    """Extract keywords from a model completion with default settings."""
    return KeywordExtractor(deduplicate=deduplicate).extract(raw_text)


def strip_code_fences(text: str) -> str:
    """Replace every fenced block with its inner content."""
    return _FENCE_RE.sub(lambda match: match.group(1), text)


def _parse_json_array(text: str) -> list[str]:
    candidate = _bracketed_span(text)
    if not candidate:
        return []

    try:
        value = json.loads(candidate)
    except (ValueError, RecursionError) as exc:
        logger.debug("Keyword array is not valid JSON, falling back to split: %s", exc)
        return []

    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        logger.debug("Keyword array has unexpected shape, falling back to split")
        return []
    return value


def _bracketed_span(text: str) -> str:
    """Return the text from the first ``[`` to the last ``]``, or ``""``."""
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end < start:
        return ""
    return text[start : end + 1]


def _split_fragments(text: str) -> list[str]:
    fragments = (fragment.strip() for fragment in _SPLIT_RE.split(text))
    return [
        fragment
        for fragment in fragments
        if fragment and not fragment.startswith(_JSON_PUNCTUATION)
    ]
