"""Shared schemas for outline2mm."""

from outline2mm.schemas.outline import OutlineNode

__all__ = ["OutlineNode"]
