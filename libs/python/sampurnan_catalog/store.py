"""Typed async façade over the hosted relational store.

The adapter speaks to Supabase (PostgREST) tables through the async
``supabase`` client. It owns offset pagination, the OR-combined
case-insensitive search filter and error wrapping; mapping rows to entity
models is left to the repositories.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Mapping, Sequence

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient

from sampurnan_observability import log_context, observe_store_call
from sampurnan_schemas import page_bounds

from .errors import StoreError

logger = logging.getLogger(__name__)

Row = dict[str, Any]

ID_COLUMN = "id"
CREATED_AT_COLUMN = "created_at"

# invalid_text_representation: an id that cannot be cast to the column type
MALFORMED_ID_CODES = frozenset({"22P02"})


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``%``, ``_`` and ``\\`` are matched literally.

    PostgREST rewrites every ``*`` in a like pattern to ``%`` and offers no escape
    for it, so ``*`` is narrowed to the single-character wildcard ``_``: a
    search for ``a*b`` still finds ``a*b`` and also ``aXb``, never ``aXYb``.
    """

    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "_")


def quote_filter_value(value: str) -> str:
    """Quote a value for a PostgREST logical filter (commas, dots, parens are reserved)."""

    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_search_filter(term: str | None, columns: Sequence[str]) -> str | None:
    """Build an ``or=(...)`` expression matching ``term`` in any of ``columns``.

    Returns ``None`` when the term is empty or whitespace, meaning no filter.
    """

    if term is None or not columns:
        return None
    cleaned = term.strip()
    if not cleaned:
        return None
    pattern = quote_filter_value(f"%{escape_like(cleaned)}%")
    return ",".join(f"{column}.ilike.{pattern}" for column in columns)


class SupabaseStore:
    """List/get/insert/update/delete over named tables.

    Every method is a single round trip. Failures are logged and re-raised as
    :class:`StoreError`; nothing is retried.
    """

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    async def list(
        self,
        table: str,
        *,
        page: int,
        page_size: int,
        search: str | None = None,
        search_columns: Sequence[str] = (),
    ) -> tuple[list[Row], int]:
        """Return one page of rows (newest first) and the filtered total."""

        start, end = page_bounds(page, page_size)
        query = (
            self._client.table(table)
            .select("*", count="exact")
            .order(CREATED_AT_COLUMN, desc=True)
            .range(start, end)
        )
        search_filter = build_search_filter(search, search_columns)
        if search_filter:
            query = query.or_(search_filter)

        response = await self._execute(table, "list", query)
        rows = list(response.data or [])
        total = response.count if response.count is not None else len(rows)
        return rows, total

    async def get_by_id(self, table: str, record_id: str) -> Row | None:
        """Return the row with ``record_id``, or ``None`` when there is none.

        An id the store cannot cast to the column type names no row either.
        """

        query = self._client.table(table).select("*").eq(ID_COLUMN, record_id).limit(1)
        response = await self._execute(table, "get", query, absent_codes=MALFORMED_ID_CODES)
        rows = (response.data if response is not None else None) or []
        return rows[0] if rows else None

    async def list_where(
        self,
        table: str,
        column: str,
        values: Iterable[Any],
        *,
        ascending: bool = True,
    ) -> list[Row]:
        """Return every row whose ``column`` is one of ``values``, ordered by creation time."""

        values = list(values)
        if not values:
            return []
        query = (
            self._client.table(table)
            .select("*")
            .in_(column, values)
            .order(CREATED_AT_COLUMN, desc=not ascending)
        )
        response = await self._execute(table, "list_where", query)
        return list(response.data or [])

    async def insert(self, table: str, row: Mapping[str, Any]) -> Row:
        query = self._client.table(table).insert(dict(row))
        response = await self._execute(table, "insert", query)
        rows = response.data or []
        if not rows:
            raise StoreError("store returned no row", table=table, operation="insert")
        return rows[0]

    async def update(self, table: str, record_id: str, changes: Mapping[str, Any]) -> Row | None:
        """Apply ``changes`` and return the updated row, or ``None`` if no row matched."""

        query = self._client.table(table).update(dict(changes)).eq(ID_COLUMN, record_id)
        response = await self._execute(table, "update", query, absent_codes=MALFORMED_ID_CODES)
        rows = (response.data if response is not None else None) or []
        return rows[0] if rows else None

    async def delete(self, table: str, record_id: str) -> bool:
        query = self._client.table(table).delete().eq(ID_COLUMN, record_id)
        await self._execute(table, "delete", query)
        return True

    async def _execute(
        self,
        table: str,
        operation: str,
        query: Any,
        *,
        absent_codes: frozenset[str] = frozenset(),
    ) -> Any:
        """Send ``query`` exactly once.

        Returns ``None`` instead of raising when the store rejects the call with
        one of ``absent_codes``.
        """

        start = time.perf_counter()
        with log_context(table=table, operation=operation):
            try:
                # postgrest retries idempotent reads on 503/520 unless told otherwise
                response = await query.retry(False).execute()
            except (APIError, httpx.HTTPError) as exc:
                elapsed = time.perf_counter() - start
                if isinstance(exc, APIError) and exc.code in absent_codes:
                    observe_store_call(table, operation, elapsed, status="absent")
                    logger.debug("Store call matched no record", extra={"code": exc.code})
                    return None
                observe_store_call(table, operation, elapsed, status="error")
                logger.error("Store call failed", extra={"error": str(exc)})
                raise StoreError(str(exc) or type(exc).__name__, table=table, operation=operation, cause=exc) from exc
            elapsed = time.perf_counter() - start
            observe_store_call(table, operation, elapsed, status="success")
            logger.debug("Store call completed", extra={"latency_ms": round(elapsed * 1000, 2)})
        return response
