"""Generative augmentation of catalog authoring.

All operations are optional helpers: nothing in the catalog depends on them.
Each one consults the :class:`AvailabilityGuard` before touching the provider,
so an unconfigured deployment makes no network calls at all.
"""

from __future__ import annotations

import logging
from typing import Callable, NoReturn, TypeVar

from sampurnan_observability import log_context, observe_augmentation, observe_provider_response
from sampurnan_providers import (
    LLMProvider,
    ProviderConfigError,
    ProviderError,
    ProviderFactory,
    ProviderRequest,
    ProviderResponse,
    ProviderResponseError,
)
from sampurnan_schemas import GroundedAnswer, ManuscriptAutofill

from . import prompts
from .errors import AugmentationError, AugmentationErrorKind
from .guard import AvailabilityGuard
from .parsing import parse_autofill, parse_string_list

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")

AUTOFILL_TEMPERATURE = 0.5
DESCRIPTION_TEMPERATURE = 0.7
TITLE_IDEAS_TEMPERATURE = 0.8
SUMMARY_TEMPERATURE = 0.5


class AugmentationClient:
    def __init__(self, guard: AvailabilityGuard, provider: LLMProvider | None = None) -> None:
        self._guard = guard
        self._provider = provider

    def is_available(self) -> bool:
        return self._guard.is_available()

    async def autofill_manuscript(self, title: str) -> ManuscriptAutofill:
        """Propose author, description, category, language, script, condition and readability."""

        operation = "autofill_manuscript"
        self._ensure_available(operation)
        request = ProviderRequest(
            prompt=prompts.autofill_prompt(title),
            json_mode=True,
            temperature=AUTOFILL_TEMPERATURE,
            metadata={"operation": operation},
        )
        response = await self._generate(operation, request)
        return self._parsed(operation, parse_autofill, response.text)

    async def generate_description(self, title: str, keywords: str | None = None) -> str:
        operation = "generate_description"
        self._ensure_available(operation)
        request = ProviderRequest(
            prompt=prompts.description_prompt(title, keywords),
            temperature=DESCRIPTION_TEMPERATURE,
            metadata={"operation": operation},
        )
        response = await self._generate(operation, request)
        return self._parsed(operation, _require_text, response.text)

    async def generate_title_ideas(self, topic: str | None = None) -> list[str]:
        operation = "generate_title_ideas"
        self._ensure_available(operation)
        request = ProviderRequest(
            prompt=prompts.title_ideas_prompt(topic),
            json_mode=True,
            temperature=TITLE_IDEAS_TEMPERATURE,
            metadata={"operation": operation},
        )
        response = await self._generate(operation, request)
        return self._parsed(
            operation, lambda text: parse_string_list(text, operation=operation), response.text
        )

    async def summarize_text(self, text: str) -> str:
        operation = "summarize_text"
        self._ensure_available(operation)
        request = ProviderRequest(
            prompt=prompts.summary_prompt(text),
            temperature=SUMMARY_TEMPERATURE,
            metadata={"operation": operation},
        )
        response = await self._generate(operation, request)
        return self._parsed(operation, _require_text, response.text)

    async def grounded_search(self, query: str) -> GroundedAnswer:
        """Answer ``query`` with the provider's web search enabled for this call only.

        When the service is unavailable an explanatory answer with no sources
        is returned instead of raising.
        """

        operation = "grounded_search"
        if not self._guard.is_available():
            observe_augmentation(operation, status=AugmentationErrorKind.UNAVAILABLE.value)
            return GroundedAnswer(text=prompts.UNAVAILABLE_SEARCH_TEXT, sources=[])

        provider = self._get_provider(operation)
        if not provider.capabilities().supports_web_search:
            self._fail(operation, AugmentationErrorKind.UNAVAILABLE, f"provider '{provider.name}' has no web search")

        request = ProviderRequest(
            prompt=prompts.grounded_search_prompt(query),
            enable_web_search=True,
            metadata={"operation": operation},
        )
        response = await self._generate(operation, request)
        text = self._parsed(operation, _require_text, response.text)
        return GroundedAnswer(text=text, sources=list(response.citations))

    def _ensure_available(self, operation: str) -> None:
        if not self._guard.is_available():
            self._fail(operation, AugmentationErrorKind.UNAVAILABLE, "generative service is not configured")

    def _get_provider(self, operation: str) -> LLMProvider:
        if self._provider is None:
            try:
                self._provider = ProviderFactory.create(self._guard.provider_config)
            except ProviderConfigError as exc:
                self._fail(operation, AugmentationErrorKind.UNAVAILABLE, str(exc), cause=exc)
        return self._provider

    async def _generate(self, operation: str, request: ProviderRequest) -> ProviderResponse:
        provider = self._get_provider(operation)
        with log_context(operation=operation, provider=provider.name):
            try:
                response = await provider.generate(request)
            except ProviderResponseError as exc:
                self._fail(operation, AugmentationErrorKind.MALFORMED_RESPONSE, str(exc), cause=exc)
            except ProviderError as exc:
                self._fail(operation, AugmentationErrorKind.TRANSPORT_FAILURE, str(exc), cause=exc)
            observe_provider_response(operation=operation, provider=provider.name, response=response)
            logger.info(
                "Augmentation response received",
                extra={
                    "prompt_tokens": response.prompt_tokens,
                    "completion_tokens": response.completion_tokens,
                    "latency_ms": response.latency_ms,
                },
            )
        return response

    def _parsed(self, operation: str, parser: Callable[[str], ResultT], text: str) -> ResultT:
        try:
            result = parser(text)
        except AugmentationError as exc:
            if exc.operation is None:
                exc.operation = operation
            observe_augmentation(operation, status=exc.kind.value)
            logger.warning(
                "Discarding malformed augmentation response",
                extra={"operation": operation, "error": exc.message},
            )
            raise
        observe_augmentation(operation, status="success")
        return result

    @staticmethod
    def _fail(
        operation: str,
        kind: AugmentationErrorKind,
        message: str,
        *,
        cause: BaseException | None = None,
    ) -> NoReturn:
        observe_augmentation(operation, status=kind.value)
        if kind is AugmentationErrorKind.UNAVAILABLE:
            logger.info("Augmentation skipped", extra={"operation": operation, "reason": message})
        else:
            logger.error("Augmentation failed", extra={"operation": operation, "error": message})
        raise AugmentationError(kind, message, operation=operation) from cause


def _require_text(text: str) -> str:
    cleaned = (text or "").strip()
    if not cleaned:
        raise AugmentationError(AugmentationErrorKind.MALFORMED_RESPONSE, "empty response")
    return cleaned
