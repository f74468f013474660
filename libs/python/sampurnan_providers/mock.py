"""Deterministic mock provider for tests and offline development."""

from __future__ import annotations

import json
from collections import deque
from typing import Iterable, Union

from .base import LLMProvider, ProviderCapabilities, ProviderRequest, ProviderResponse
from .config import ProviderConfig, ProviderSettings

DEFAULT_TEXT = "Mock response generated for testing."

ScriptedReply = Union[str, ProviderResponse, BaseException]


class MockProvider(LLMProvider):
    """Replays scripted replies in order, then falls back to canned output.

    Every request is appended to :attr:`calls` so callers can assert how many
    round trips were attempted and with which parameters.
    """

    name = "mock"

    def __init__(
        self,
        config: ProviderConfig | None = None,
        replies: Iterable[ScriptedReply] | None = None,
        *,
        supports_web_search: bool = True,
    ) -> None:
        if config is None:
            settings = ProviderSettings(temperature=0.1)
            config = ProviderConfig(name="mock", api_key="mock", model="mock", settings=settings)
        self._config = config
        self._replies: deque[ScriptedReply] = deque(replies or [])
        self._supports_web_search = supports_web_search
        self.calls: list[ProviderRequest] = []

    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            supports_json_mode=True,
            supports_web_search=self._supports_web_search,
            max_output_tokens=2000,
        )

    def queue(self, *replies: ScriptedReply) -> None:
        self._replies.extend(replies)

    async def generate(self, request: ProviderRequest) -> ProviderResponse:
        self.calls.append(request)
        if self._replies:
            reply = self._replies.popleft()
            if isinstance(reply, BaseException):
                raise reply
            if isinstance(reply, ProviderResponse):
                return reply
            text = reply
        elif request.json_mode:
            text = json.dumps({"message": DEFAULT_TEXT, "echo": request.prompt[:50]})
        else:
            text = f"{DEFAULT_TEXT}\nPrompt: {request.prompt[:80]}"
        return ProviderResponse(
            text=text,
            raw={"mock": True},
            model=self._config.model,
            prompt_tokens=len(request.prompt.split()),
            completion_tokens=len(text.split()),
            latency_ms=1.0,
        )
