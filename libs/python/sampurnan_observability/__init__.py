"""Logging and metrics helpers shared by the catalog and augmentation layers."""

from .logging import current_log_context, log_context, setup_logging
from .metrics import (
    observe_augmentation,
    observe_provider_response,
    observe_store_call,
)

__all__ = [
    "setup_logging",
    "log_context",
    "current_log_context",
    "observe_store_call",
    "observe_augmentation",
    "observe_provider_response",
]
