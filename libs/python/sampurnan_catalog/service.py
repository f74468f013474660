"""Entry point bundling the three repositories behind one store."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from sampurnan_schemas import GuestbookEntry, Manuscript, Page, Post

from .config import StoreSettings, create_store_client
from .repositories import GuestbookRepository, ManuscriptRepository, PostRepository
from .store import SupabaseStore

OVERVIEW_LIMIT = 3


@dataclass
class CatalogOverview:
    """Landing-page snapshot: a few matching manuscripts and posts plus the newest guestbook entries."""

    manuscripts: Page[Manuscript]
    posts: Page[Post]
    guestbook: Page[GuestbookEntry]


class CatalogService:
    def __init__(self, store: SupabaseStore) -> None:
        self.store = store
        self.manuscripts = ManuscriptRepository(store)
        self.posts = PostRepository(store)
        self.guestbook = GuestbookRepository(store)

    @classmethod
    async def connect(cls, settings: StoreSettings | None = None) -> "CatalogService":
        client = await create_store_client(settings)
        return cls(SupabaseStore(client))

    async def overview(self, search: str | None = None, limit: int = OVERVIEW_LIMIT) -> CatalogOverview:
        """Fetch the first page of each collection concurrently.

        The search term applies to manuscripts and posts; guestbook entries are
        always the newest ones. Any store failure propagates.
        """

        manuscripts, posts, guestbook = await asyncio.gather(
            self.manuscripts.list(1, limit, search),
            self.posts.list(1, limit, search),
            self.guestbook.list(1, limit),
        )
        return CatalogOverview(manuscripts=manuscripts, posts=posts, guestbook=guestbook)
