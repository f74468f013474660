"""Enum definitions shared across the catalog."""

from __future__ import annotations

from enum import Enum


class ManuscriptStatus(str, Enum):
    """Circulation state of a manuscript; values are the stored literals."""

    AVAILABLE = "Tersedia"
    ON_LOAN = "Dipinjam"
    DAMAGED = "Rusak"


class ContentBlockKind(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING = "heading"


class CitationKind(str, Enum):
    WEB = "web"
    RETRIEVED_CONTEXT = "retrieved_context"
