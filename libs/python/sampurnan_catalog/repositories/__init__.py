from .base import Repository
from .guestbook import GuestbookRepository
from .manuscripts import ManuscriptRepository
from .posts import PostRepository

__all__ = ["Repository", "GuestbookRepository", "ManuscriptRepository", "PostRepository"]
