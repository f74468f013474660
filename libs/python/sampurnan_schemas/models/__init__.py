from .augmentation import Citation, GroundedAnswer, GroundingSource, ManuscriptAutofill
from .catalog import (
    STORE_OWNED_FIELDS,
    Comment,
    CommentCreate,
    ContentBlock,
    GuestbookEntry,
    GuestbookEntryCreate,
    GuestbookEntryUpdate,
    Manuscript,
    ManuscriptCreate,
    ManuscriptUpdate,
    Post,
    PostCreate,
    PostUpdate,
)
from .pagination import Page, page_bounds

__all__ = [
    "Citation",
    "GroundedAnswer",
    "GroundingSource",
    "ManuscriptAutofill",
    "STORE_OWNED_FIELDS",
    "Comment",
    "CommentCreate",
    "ContentBlock",
    "GuestbookEntry",
    "GuestbookEntryCreate",
    "GuestbookEntryUpdate",
    "Manuscript",
    "ManuscriptCreate",
    "ManuscriptUpdate",
    "Post",
    "PostCreate",
    "PostUpdate",
    "Page",
    "page_bounds",
]
