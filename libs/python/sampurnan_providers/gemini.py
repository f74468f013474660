"""Google Gemini provider implementation."""

from __future__ import annotations

import time
from typing import Any, Dict

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from sampurnan_schemas import Citation, CitationKind, GroundingSource

from .base import LLMProvider, ProviderCapabilities, ProviderRequest, ProviderResponse
from .config import ProviderConfig
from .exceptions import ProviderConfigError, ProviderResponseError, ProviderTransportError


class GeminiProvider(LLMProvider):
    name = "gemini"

    def __init__(self, config: ProviderConfig) -> None:
        if not config.has_credentials:
            raise ProviderConfigError("Gemini provider requires an API key")
        self._config = config
        self._client = genai.Client(api_key=config.api_key)

    def capabilities(self) -> ProviderCapabilities:
        return ProviderCapabilities(
            supports_json_mode=True,
            supports_web_search=True,
            max_output_tokens=self._config.settings.max_output_tokens,
        )

    def _generation_config(self, request: ProviderRequest) -> types.GenerateContentConfig:
        settings = self._config.settings
        params: Dict[str, Any] = {
            "temperature": request.temperature if request.temperature is not None else settings.temperature,
        }

        top_p = request.top_p if request.top_p is not None else settings.top_p
        if top_p is not None:
            params["top_p"] = top_p

        max_output = (
            request.max_output_tokens
            if request.max_output_tokens is not None
            else settings.max_output_tokens
        )
        if max_output:
            params["max_output_tokens"] = max_output

        if request.system_prompt:
            params["system_instruction"] = request.system_prompt

        # The search tool cannot be combined with a JSON response mime type.
        if request.enable_web_search:
            params["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        elif request.json_mode:
            params["response_mime_type"] = "application/json"

        return types.GenerateContentConfig(**params)

    async def generate(self, request: ProviderRequest) -> ProviderResponse:
        start = time.perf_counter()
        try:
            response = await self._client.aio.models.generate_content(
                model=self._config.model,
                contents=request.prompt,
                config=self._generation_config(request),
            )
        except (genai_errors.APIError, httpx.HTTPError) as err:
            raise ProviderTransportError(f"Gemini request failed: {err}") from err
        latency_ms = (time.perf_counter() - start) * 1000

        try:
            text = response.text or ""
        except (AttributeError, ValueError) as err:
            raise ProviderResponseError("Gemini response missing text content") from err

        usage = getattr(response, "usage_metadata", None)
        prompt_tokens = (getattr(usage, "prompt_token_count", None) or 0) if usage else 0
        completion_tokens = (getattr(usage, "candidates_token_count", None) or 0) if usage else 0

        return ProviderResponse(
            text=text,
            raw=response,
            model=self._config.model,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            latency_ms=latency_ms,
            citations=extract_citations(response),
        )


def extract_citations(response: Any) -> list[Citation]:
    """Collect grounding chunks from the first candidate, if any."""

    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    citations: list[Citation] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        if web is not None:
            citations.append(
                Citation(
                    kind=CitationKind.WEB,
                    source=GroundingSource(uri=getattr(web, "uri", None), title=getattr(web, "title", None)),
                )
            )
            continue
        retrieved = getattr(chunk, "retrieved_context", None)
        if retrieved is not None:
            citations.append(
                Citation(
                    kind=CitationKind.RETRIEVED_CONTEXT,
                    source=GroundingSource(
                        uri=getattr(retrieved, "uri", None), title=getattr(retrieved, "title", None)
                    ),
                )
            )
    return citations
