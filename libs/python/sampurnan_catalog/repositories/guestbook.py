"""Guestbook repository: flat CRUD, no search columns."""

from __future__ import annotations

from sampurnan_schemas import GuestbookEntry, GuestbookEntryCreate, GuestbookEntryUpdate

from .base import Repository


class GuestbookRepository(Repository[GuestbookEntry, GuestbookEntryCreate, GuestbookEntryUpdate]):
    table = "guestbook_entries"
    record_model = GuestbookEntry
    create_model = GuestbookEntryCreate
    update_model = GuestbookEntryUpdate
