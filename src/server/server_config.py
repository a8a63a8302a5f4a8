"""Server configuration."""

from __future__ import annotations

import os

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8000
DEFAULT_MAX_INPUT_CHARS = 200_000

HOST = os.getenv("HOST", DEFAULT_HOST)
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"

# Upper bound on request text (model output or outline notation).
MAX_INPUT_CHARS = int(os.getenv("OUTLINE2MM_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
DOWNLOAD_ERROR_MESSAGE = "An error occurred while generating the XML file. Please try again."
