"""Pydantic models for the API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from outline2mm.config import OUTLINE_START_MARKER
from server.server_config import MAX_INPUT_CHARS


class KeywordsRequest(BaseModel):
    """Request model for the /api/keywords endpoint.

    Attributes
    ----------
    text : str
        Raw completion text returned by the language model.
    deduplicate : bool
        Drop repeated keywords, keeping the first occurrence.

    """

    text: str = Field(..., max_length=MAX_INPUT_CHARS, description="Raw model completion text")
    deduplicate: bool = Field(default=False, description="Drop repeated keywords")


class KeywordsResponse(BaseModel):
    """Response model for the /api/keywords endpoint."""

    keywords: list[str] = Field(default_factory=list, description="Extracted keywords in order")


class OutlineRequest(BaseModel):
    """Request model for the /api/mindmap/markdown endpoint.

    Attributes
    ----------
    outline : str
        Outline notation.

    """

    outline: str = Field(..., max_length=MAX_INPUT_CHARS, description="Outline notation")


class MindmapRequest(OutlineRequest):
    """Request model for the /api/mindmap/download endpoint.

    Attributes
    ----------
    outline : str
        Outline notation, starting with the start marker.

    """

    @field_validator("outline")
    @classmethod
    def validate_outline(cls, v: str) -> str:
        """Validate that ``outline`` starts with the start marker."""
        if not v.startswith(OUTLINE_START_MARKER):
            err = f"outline must start with {OUTLINE_START_MARKER}"
            raise ValueError(err)
        return v


class MarkdownResponse(BaseModel):
    """Response model for the /api/mindmap/markdown endpoint.

    Attributes
    ----------
    markdown : str
        Outline headings rendered as Markdown headings.
    nodes : int
        Number of headings in the outline.

    """

    markdown: str = Field(..., description="Markdown headings")
    nodes: int = Field(..., ge=0, description="Number of headings")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
