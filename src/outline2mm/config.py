"""Local configuration for outline2mm."""

from __future__ import annotations

import os


DEFAULT_START_MARKER = "@startmindmap"
DEFAULT_END_MARKER = "@endmindmap"
DEFAULT_ROOT_TEXT = "Mind Map"
DEFAULT_FILENAME = "mindmap.mm"
DEFAULT_LOG_LEVEL = "INFO"

FREEMIND_VERSION = "1.0.1"
MINDMAP_MEDIA_TYPE = "application/x-freemind"

# Literal marker lines that delimit outline notation.
OUTLINE_START_MARKER = os.getenv("OUTLINE2MM_START_MARKER", DEFAULT_START_MARKER)
OUTLINE_END_MARKER = os.getenv("OUTLINE2MM_END_MARKER", DEFAULT_END_MARKER)
# TEXT of the synthetic root <node> in exported mind maps.
MINDMAP_ROOT_TEXT = os.getenv("OUTLINE2MM_ROOT_TEXT", DEFAULT_ROOT_TEXT)
MINDMAP_FILENAME = os.getenv("OUTLINE2MM_FILENAME", DEFAULT_FILENAME)
OUTLINE2MM_LOG_LEVEL = os.getenv("OUTLINE2MM_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
