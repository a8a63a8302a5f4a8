"""Outline tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OutlineNode(BaseModel):
    """A hierarchical outline heading.

    The synthetic root of a parsed outline has ``level`` 0 and no text. Every
    other node keeps the level it was written with, even when the outline
    skips levels.
    """

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=0)
    text: str = ""
    children: list["OutlineNode"] = Field(default_factory=list)
