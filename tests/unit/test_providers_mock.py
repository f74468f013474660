"""Tests for the mock provider, the factory and the Gemini request/response mapping."""

import asyncio
from types import SimpleNamespace

import httpx
import pytest
from google.genai import errors as genai_errors

from sampurnan_augmentation import AugmentationClient, AugmentationError, AugmentationErrorKind, AvailabilityGuard
from sampurnan_providers import (
    MockProvider,
    ProviderConfig,
    ProviderConfigError,
    ProviderFactory,
    ProviderRequest,
    ProviderSettings,
    ProviderTransportError,
)
from sampurnan_providers.gemini import GeminiProvider, extract_citations
from sampurnan_schemas import CitationKind


def test_mock_generate() -> None:
    provider = MockProvider()
    response = asyncio.run(provider.generate(ProviderRequest(prompt="Hello world")))
    assert response.model == "mock"
    assert "Mock response" in response.text
    assert response.prompt_tokens > 0


def test_mock_replays_script_then_records_calls() -> None:
    provider = MockProvider(replies=["first"])
    provider.queue(RuntimeError("boom"))
    assert asyncio.run(provider.generate(ProviderRequest(prompt="a"))).text == "first"
    with pytest.raises(RuntimeError):
        asyncio.run(provider.generate(ProviderRequest(prompt="b")))
    assert [call.prompt for call in provider.calls] == ["a", "b"]


def test_mock_json_mode() -> None:
    provider = MockProvider()
    response = asyncio.run(provider.generate(ProviderRequest(prompt="List facts", json_mode=True)))
    assert response.text.startswith("{")


def test_factory_creates_mock_when_config_provided() -> None:
    config = ProviderConfig(name="mock", api_key="mock", model="mock", settings=ProviderSettings())
    assert isinstance(ProviderFactory.create(config), MockProvider)


def test_factory_rejects_unknown_provider() -> None:
    with pytest.raises(ProviderConfigError):
        ProviderFactory.create(ProviderConfig(name="unknown", api_key="k", model="m"))


def test_gemini_requires_key() -> None:
    with pytest.raises(ProviderConfigError):
        GeminiProvider(ProviderConfig(name="gemini", model="gemini-2.5-flash"))


def test_extract_citations_reads_web_and_retrieved_context() -> None:
    response = SimpleNamespace(
        candidates=[
            SimpleNamespace(
                grounding_metadata=SimpleNamespace(
                    grounding_chunks=[
                        SimpleNamespace(web=SimpleNamespace(uri="https://a.example", title="A"), retrieved_context=None),
                        SimpleNamespace(web=None, retrieved_context=SimpleNamespace(uri=None, title="Arsip")),
                        SimpleNamespace(web=None, retrieved_context=None),
                    ]
                )
            )
        ]
    )
    citations = extract_citations(response)
    assert [citation.kind for citation in citations] == [CitationKind.WEB, CitationKind.RETRIEVED_CONTEXT]
    assert citations[0].uri == "https://a.example"
    assert citations[1].title == "Arsip"


def test_extract_citations_defaults_to_empty() -> None:
    assert extract_citations(SimpleNamespace(candidates=None)) == []
    assert extract_citations(SimpleNamespace(candidates=[SimpleNamespace(grounding_metadata=None)])) == []


def gemini_provider(**settings) -> GeminiProvider:
    return GeminiProvider(
        ProviderConfig(
            name="gemini",
            api_key="secret",
            model="gemini-2.5-flash",
            settings=ProviderSettings(**settings),
        )
    )


def test_gemini_json_mode_sets_mime_type_and_temperature() -> None:
    config = gemini_provider()._generation_config(
        ProviderRequest(prompt="Babad", json_mode=True, temperature=0.5)
    )
    assert config.response_mime_type == "application/json"
    assert config.temperature == 0.5
    assert not config.tools


def test_gemini_falls_back_to_configured_settings() -> None:
    config = gemini_provider(temperature=0.3, top_p=0.9, max_output_tokens=256)._generation_config(
        ProviderRequest(prompt="Babad", system_prompt="Jawab singkat")
    )
    assert config.temperature == 0.3
    assert config.top_p == 0.9
    assert config.max_output_tokens == 256
    assert "Jawab singkat" in str(config.system_instruction)
    assert config.response_mime_type is None


def test_gemini_search_tool_is_per_request() -> None:
    provider = gemini_provider()
    grounded = provider._generation_config(
        ProviderRequest(prompt="Naskah Lontar", enable_web_search=True, json_mode=True)
    )
    assert len(grounded.tools) == 1
    assert grounded.tools[0].google_search is not None
    assert grounded.response_mime_type is None

    plain = provider._generation_config(ProviderRequest(prompt="Naskah Lontar"))
    assert not plain.tools


@pytest.mark.parametrize(
    "failure",
    [
        genai_errors.ServerError(503, {"error": {"code": 503, "message": "overloaded", "status": "UNAVAILABLE"}}),
        httpx.ConnectError("connection refused"),
    ],
)
def test_gemini_transport_failures_are_wrapped(monkeypatch: pytest.MonkeyPatch, failure: Exception) -> None:
    provider = gemini_provider()

    async def fail(**kwargs):
        raise failure

    monkeypatch.setattr(provider._client.aio.models, "generate_content", fail)

    with pytest.raises(ProviderTransportError) as excinfo:
        asyncio.run(provider.generate(ProviderRequest(prompt="Babad")))
    assert excinfo.value.__cause__ is failure

    guard = AvailabilityGuard.from_config(provider._config)
    client = AugmentationClient(guard, provider=provider)
    with pytest.raises(AugmentationError) as excinfo:
        asyncio.run(client.generate_description("Babad Diponegoro"))
    assert excinfo.value.kind is AugmentationErrorKind.TRANSPORT_FAILURE
