"""Core interfaces and dataclasses for provider interactions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, MutableMapping

from sampurnan_schemas import Citation


@dataclass(slots=True)
class ProviderRequest:
    """Normalized request passed to providers."""

    prompt: str
    system_prompt: str | None = None
    json_mode: bool = False
    temperature: float | None = None
    max_output_tokens: int | None = None
    top_p: float | None = None
    enable_web_search: bool = False
    metadata: MutableMapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ProviderResponse:
    """Standard response returned by providers."""

    text: str
    raw: Any
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    latency_ms: float | None = None
    citations: list[Citation] = field(default_factory=list)
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class ProviderCapabilities:
    """Capability flags consulted before issuing a request."""

    supports_json_mode: bool = False
    supports_web_search: bool = False
    max_output_tokens: int | None = None


class LLMProvider(ABC):
    """Abstract base class implemented by concrete providers."""

    name: str

    @abstractmethod
    def capabilities(self) -> ProviderCapabilities:
        """Return capability metadata."""

    @abstractmethod
    async def generate(self, request: ProviderRequest) -> ProviderResponse:
        """Generate text (or JSON text) for the provided prompt."""
