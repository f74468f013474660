"""Shared CRUD plumbing for entity repositories."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, Mapping, Type, TypeVar

from pydantic import BaseModel

from sampurnan_schemas import STORE_OWNED_FIELDS, Page

from ..errors import NotFoundError
from ..store import SupabaseStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)


class Repository(Generic[RecordT, CreateT, UpdateT]):
    """list/get/add/update/delete for one table.

    Subclasses declare the table, the three model shapes and the columns the
    search term is matched against.
    """

    table: ClassVar[str]
    record_model: ClassVar[Type[BaseModel]]
    create_model: ClassVar[Type[BaseModel]]
    update_model: ClassVar[Type[BaseModel]]
    search_columns: ClassVar[tuple[str, ...]] = ()
    # Fields that exist on the record but are never written as part of it.
    read_only_fields: ClassVar[frozenset[str]] = STORE_OWNED_FIELDS

    def __init__(self, store: SupabaseStore) -> None:
        self._store = store

    async def list(self, page: int = 1, page_size: int = 10, search: str | None = None) -> Page[RecordT]:
        rows, total = await self._store.list(
            self.table,
            page=page,
            page_size=page_size,
            search=search,
            search_columns=self.search_columns,
        )
        records = await self._hydrate(rows)
        return Page(items=records, total=total, page=page, page_size=page_size)

    async def get(self, record_id: str) -> RecordT | None:
        row = await self._store.get_by_id(self.table, str(record_id))
        if row is None:
            return None
        records = await self._hydrate([row])
        return records[0]

    async def add(self, data: CreateT | BaseModel | Mapping[str, Any]) -> RecordT:
        payload = self._coerce(self.create_model, data)
        row = payload.model_dump(mode="json", exclude=set(self.read_only_fields))
        created = await self._store.insert(self.table, row)
        logger.info("Record created", extra={"table": self.table, "record_id": str(created.get("id"))})
        records = await self._hydrate([created])
        return records[0]

    async def update(self, record_id: str, changes: UpdateT | BaseModel | Mapping[str, Any]) -> RecordT:
        """Write only the explicitly set fields of ``changes``.

        Raises:
            NotFoundError: If no record with ``record_id`` exists.
        """

        payload = self._coerce(self.update_model, changes)
        row = payload.model_dump(mode="json", exclude_unset=True, exclude=set(self.read_only_fields))
        if not row:
            current = await self.get(record_id)
            if current is None:
                raise NotFoundError(self.table, str(record_id))
            return current

        updated = await self._store.update(self.table, str(record_id), row)
        if updated is None:
            raise NotFoundError(self.table, str(record_id))
        records = await self._hydrate([updated])
        return records[0]

    async def delete(self, record_id: str) -> bool:
        deleted = await self._store.delete(self.table, str(record_id))
        logger.info("Record deleted", extra={"table": self.table, "record_id": str(record_id)})
        return deleted

    async def _hydrate(self, rows: list[dict[str, Any]]) -> list[RecordT]:
        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: Mapping[str, Any]) -> RecordT:
        return self.record_model.model_validate(row)  # type: ignore[return-value]

    @staticmethod
    def _coerce(model: Type[BaseModel], data: BaseModel | Mapping[str, Any]) -> BaseModel:
        if isinstance(data, model):
            return data
        if isinstance(data, BaseModel):
            # Carry over only what the caller actually set.
            data = data.model_dump(exclude_unset=True)
        return model.model_validate(data)
