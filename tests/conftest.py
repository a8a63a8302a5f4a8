"""Test setup for outline2mm."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sample_outline() -> str:
    """Outline notation with two top-level headings and one nested heading."""
    return "@startmindmap\n+A\n++B\n+C\n@endmindmap"
