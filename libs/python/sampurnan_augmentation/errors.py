"""Error taxonomy for augmentation operations."""

from __future__ import annotations

from enum import Enum


class AugmentationErrorKind(str, Enum):
    UNAVAILABLE = "unavailable"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"


class AugmentationError(RuntimeError):
    """Raised when an augmentation cannot produce a trustworthy result."""

    def __init__(self, kind: AugmentationErrorKind, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.operation = operation

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def __repr__(self) -> str:
        return f"AugmentationError(kind={self.kind.value!r}, operation={self.operation!r}, message={self.message!r})"
