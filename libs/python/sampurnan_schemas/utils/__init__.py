"""Utility helpers for catalog schemas."""

from .content import BLOCK_SEPARATOR, HEADING_MARKER, parse_content_blocks

__all__ = ["BLOCK_SEPARATOR", "HEADING_MARKER", "parse_content_blocks"]
