"""Manuscript repository."""

from __future__ import annotations

from pathlib import PurePath

from sampurnan_schemas import Manuscript, ManuscriptCreate, ManuscriptUpdate

from .base import Repository

SPREADSHEET_SUFFIXES = (".xls", ".xlsx")


class ManuscriptRepository(Repository[Manuscript, ManuscriptCreate, ManuscriptUpdate]):
    table = "manuscripts"
    record_model = Manuscript
    create_model = ManuscriptCreate
    update_model = ManuscriptUpdate
    search_columns = ("title", "description", "author")

    async def import_spreadsheet(self, path: str | PurePath) -> list[Manuscript]:
        """Bulk import from an ``.xls``/``.xlsx`` sheet. Not supported yet."""

        name = PurePath(path).name
        if not name.lower().endswith(SPREADSHEET_SUFFIXES):
            raise ValueError(f"{name} is not a spreadsheet ({', '.join(SPREADSHEET_SUFFIXES)})")
        raise NotImplementedError(f"Spreadsheet import is not available yet: {name}")
