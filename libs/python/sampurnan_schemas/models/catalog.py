"""Domain models for manuscripts, journal posts, comments and guestbook entries.

Each entity comes in three shapes: the full record as stored (with the
store-assigned ``id`` and ``created_at``), a ``*Create`` payload that silently
drops store-owned fields, and a ``*Update`` payload where every field is
optional so only explicitly set values are written.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..enums import ContentBlockKind, ManuscriptStatus
from ..utils.content import parse_content_blocks

Identifier = Annotated[str, BeforeValidator(lambda value: str(value) if value is not None else value)]

STORE_OWNED_FIELDS = frozenset({"id", "created_at"})


class ManuscriptBase(BaseModel):
    """Descriptive, provenance and classification fields of a manuscript."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=300)
    author: str = ""
    category: str = ""
    language: str = ""
    script: str = ""
    size: str = Field("", description="Physical dimensions, e.g. '20cm x 30cm'")
    description: str = ""
    colophon: Optional[str] = None
    copyist: Optional[str] = None
    copy_year: Optional[int] = None
    ink: Optional[str] = None
    inventory_code: str = ""
    digital_code: str = ""
    status: ManuscriptStatus = ManuscriptStatus.AVAILABLE
    page_count: int = Field(0, ge=0)
    condition: str = ""
    readability: str = ""
    cover_image_url: str = ""
    external_folder_url: Optional[str] = None


class ManuscriptCreate(ManuscriptBase):
    """Insert payload; ``id``/``created_at`` are ignored if supplied."""


class Manuscript(ManuscriptBase):
    id: Identifier
    created_at: Optional[datetime] = None


class ManuscriptUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(None, min_length=1, max_length=300)
    author: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
    script: Optional[str] = None
    size: Optional[str] = None
    description: Optional[str] = None
    colophon: Optional[str] = None
    copyist: Optional[str] = None
    copy_year: Optional[int] = None
    ink: Optional[str] = None
    inventory_code: Optional[str] = None
    digital_code: Optional[str] = None
    status: Optional[ManuscriptStatus] = None
    page_count: Optional[int] = Field(None, ge=0)
    condition: Optional[str] = None
    readability: Optional[str] = None
    cover_image_url: Optional[str] = None
    external_folder_url: Optional[str] = None


class ContentBlock(BaseModel):
    kind: ContentBlockKind
    text: str


class CommentCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    author: str = Field(..., min_length=1, max_length=120)
    text: str = Field(..., min_length=1)


class Comment(BaseModel):
    """A comment always carries the id of the post it belongs to."""

    model_config = ConfigDict(extra="ignore")

    id: Identifier
    post_id: Identifier
    author: str
    text: str
    created_at: Optional[datetime] = None

    @property
    def date(self) -> Optional[datetime]:
        return self.created_at


class PostBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=300)
    author: str = Field(..., min_length=1)
    summary: str = ""
    content: str = ""
    image_url: Optional[str] = None


class PostCreate(PostBase):
    """Insert payload; comments are never part of a post write."""


class Post(PostBase):
    id: Identifier
    created_at: Optional[datetime] = None
    comments: list[Comment] = Field(default_factory=list)

    @property
    def date(self) -> Optional[datetime]:
        return self.created_at

    def blocks(self) -> list[ContentBlock]:
        return parse_content_blocks(self.content)


class PostUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(None, min_length=1, max_length=300)
    author: Optional[str] = Field(None, min_length=1)
    summary: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None


class GuestbookEntryCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=120)
    message: str = Field(..., min_length=1, max_length=2000)


class GuestbookEntry(GuestbookEntryCreate):
    id: Identifier
    created_at: Optional[datetime] = None

    @property
    def date(self) -> Optional[datetime]:
        return self.created_at


class GuestbookEntryUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    message: Optional[str] = Field(None, min_length=1, max_length=2000)
