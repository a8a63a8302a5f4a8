"""Custom exceptions for outline2mm."""


class Outline2mmError(Exception):
    """Base exception for outline2mm operations."""


class ConversionError(Outline2mmError):
    """Error during format conversion."""


class OutlineStructureError(ConversionError):
    """Outline tree is not a tree (a node is reachable more than once)."""
