"""Shared pydantic schemas for the Sampurnan manuscript catalog."""

from .enums import CitationKind, ContentBlockKind, ManuscriptStatus
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .utils import parse_content_blocks

__all__ = ["CitationKind", "ContentBlockKind", "ManuscriptStatus", "parse_content_blocks", *_models_all]
