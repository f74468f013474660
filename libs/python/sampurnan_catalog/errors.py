"""Exceptions raised by the store adapter and repositories."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base error for the catalog layer."""


class StoreConfigError(CatalogError):
    """Raised when store credentials are missing."""


class StoreError(CatalogError):
    """A relational store call failed; the original exception is kept as ``cause``."""

    def __init__(
        self,
        message: str,
        *,
        table: str,
        operation: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.table = table
        self.operation = operation
        self.cause = cause

    def __str__(self) -> str:
        base = f"{self.operation} on '{self.table}' failed: {self.args[0]}"
        detail = str(self.cause) if self.cause is not None else ""
        if detail and detail != self.args[0]:
            return f"{base} ({detail})"
        return base


class NotFoundError(CatalogError, LookupError):
    """Raised when a write targets a record that does not exist."""

    def __init__(self, table: str, record_id: str) -> None:
        super().__init__(f"No record '{record_id}' in '{table}'")
        self.table = table
        self.record_id = record_id
