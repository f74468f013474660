"""Paginated, search-filtered CRUD over the manuscript catalog."""

from .config import StoreSettings, create_store_client
from .errors import CatalogError, NotFoundError, StoreConfigError, StoreError
from .repositories import GuestbookRepository, ManuscriptRepository, PostRepository, Repository
from .service import CatalogOverview, CatalogService
from .store import SupabaseStore, build_search_filter

__all__ = [
    "StoreSettings",
    "create_store_client",
    "CatalogError",
    "NotFoundError",
    "StoreConfigError",
    "StoreError",
    "GuestbookRepository",
    "ManuscriptRepository",
    "PostRepository",
    "Repository",
    "CatalogOverview",
    "CatalogService",
    "SupabaseStore",
    "build_search_filter",
]
