"""Prometheus metrics for store round trips and generative-service calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from prometheus_client import Counter, Histogram

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from sampurnan_providers.base import ProviderResponse


STORE_CALLS = Counter(
    "sampurnan_store_calls_total",
    "Relational store calls by table, operation and outcome",
    labelnames=("table", "operation", "status"),
)

STORE_LATENCY = Histogram(
    "sampurnan_store_call_duration_seconds",
    "Latency of relational store calls",
    labelnames=("table", "operation"),
)

AUGMENTATION_CALLS = Counter(
    "sampurnan_augmentation_calls_total",
    "Augmentation operations by outcome",
    labelnames=("operation", "status"),
)

LLM_TOKENS = Counter(
    "sampurnan_llm_tokens_total",
    "Token usage by provider and operation",
    labelnames=("operation", "provider", "token_type"),
)

LLM_LATENCY = Histogram(
    "sampurnan_llm_latency_seconds",
    "Latency of generative provider calls",
    labelnames=("operation", "provider"),
)


def observe_store_call(table: str, operation: str, duration_seconds: float, *, status: str) -> None:
    STORE_LATENCY.labels(table, operation).observe(max(duration_seconds, 0.0))
    STORE_CALLS.labels(table, operation, status).inc()


def observe_augmentation(operation: str, *, status: str) -> None:
    AUGMENTATION_CALLS.labels(operation, status).inc()


def observe_provider_response(
    *,
    operation: str,
    provider: str,
    response: Optional["ProviderResponse"],
) -> None:
    """Capture token usage and latency from a provider response."""

    if response is None:
        return

    prompt_tokens = getattr(response, "prompt_tokens", None)
    if isinstance(prompt_tokens, (int, float)) and prompt_tokens >= 0:
        LLM_TOKENS.labels(operation, provider, "prompt").inc(prompt_tokens)

    completion_tokens = getattr(response, "completion_tokens", None)
    if isinstance(completion_tokens, (int, float)) and completion_tokens >= 0:
        LLM_TOKENS.labels(operation, provider, "completion").inc(completion_tokens)

    latency_ms = getattr(response, "latency_ms", None)
    if isinstance(latency_ms, (int, float)) and latency_ms >= 0:
        LLM_LATENCY.labels(operation, provider).observe(latency_ms / 1000)
