"""Utility helpers for outline2mm."""
