"""Tests for the augmentation client, its guard and output parsing."""

from __future__ import annotations

import json

import pytest

from sampurnan_augmentation import (
    AugmentationClient,
    AugmentationError,
    AugmentationErrorKind,
    AvailabilityGuard,
    parse_autofill,
    strip_code_fence,
)
from sampurnan_providers import (
    MockProvider,
    ProviderConfig,
    ProviderResponse,
    ProviderResponseError,
    ProviderTransportError,
)
from sampurnan_schemas import Citation, CitationKind, GroundingSource

pytestmark = pytest.mark.anyio

AUTOFILL = {
    "author": "Empu Prapanca",
    "description": "Kakawin tentang Majapahit.",
    "category": "Sejarah",
    "language": "Jawa Kuno",
    "script": "Kawi",
    "condition": "Rapuh",
    "readability": "Memudar",
}


def available_guard() -> AvailabilityGuard:
    return AvailabilityGuard.from_config(ProviderConfig(name="gemini", api_key="secret", model="gemini-2.5-flash"))


def make_client(*replies, supports_web_search: bool = True) -> tuple[AugmentationClient, MockProvider]:
    provider = MockProvider(replies=replies, supports_web_search=supports_web_search)
    return AugmentationClient(available_guard(), provider=provider), provider


def test_guard_reflects_credential_presence() -> None:
    assert available_guard().is_available()
    assert not AvailabilityGuard.disabled().is_available()
    assert not AvailabilityGuard.from_config(ProviderConfig(name="gemini", api_key="  ", model="m")).is_available()
    assert not AvailabilityGuard.from_config(None).is_available()


def test_guard_from_env_without_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LLM_PROVIDER", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    assert not AvailabilityGuard.from_env().is_available()
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    assert AvailabilityGuard.from_env().is_available()


@pytest.mark.parametrize(
    "text",
    [
        json.dumps(AUTOFILL),
        "```json\n" + json.dumps(AUTOFILL) + "\n```",
        "```\n" + json.dumps(AUTOFILL, indent=2) + "\n```",
        "  \n```JSON\n" + json.dumps(AUTOFILL) + "\n```\n",
    ],
)
def test_autofill_parses_fenced_and_bare_json_identically(text: str) -> None:
    assert parse_autofill(text).model_dump() == AUTOFILL


def test_strip_code_fence_leaves_plain_text() -> None:
    assert strip_code_fence("  [1, 2]  ") == "[1, 2]"


@pytest.mark.parametrize("text", ["42", "[\"a\"]", "\"teks\"", "null"])
def test_autofill_rejects_non_object_json(text: str) -> None:
    with pytest.raises(AugmentationError) as excinfo:
        parse_autofill(text)
    assert excinfo.value.kind is AugmentationErrorKind.MALFORMED_RESPONSE


def test_autofill_rejects_invalid_json() -> None:
    with pytest.raises(AugmentationError) as excinfo:
        parse_autofill("{author: Empu")
    assert excinfo.value.kind is AugmentationErrorKind.MALFORMED_RESPONSE


def test_autofill_rejects_partial_objects() -> None:
    partial = {key: value for key, value in AUTOFILL.items() if key != "script"}
    with pytest.raises(AugmentationError):
        parse_autofill(json.dumps(partial))
    with pytest.raises(AugmentationError):
        parse_autofill(json.dumps({**AUTOFILL, "page_count": 12}))


async def test_autofill_requests_json_at_low_temperature() -> None:
    client, provider = make_client("```json\n" + json.dumps(AUTOFILL) + "\n```")
    result = await client.autofill_manuscript("Negarakertagama")

    assert result.script == "Kawi"
    request = provider.calls[0]
    assert request.json_mode is True
    assert request.temperature == 0.5
    assert "Negarakertagama" in request.prompt
    assert not request.enable_web_search


async def test_description_returns_raw_text() -> None:
    client, provider = make_client("  Naskah ini memuat silsilah raja-raja Mataram.  ")
    text = await client.generate_description("Babad Tanah Jawi", keywords="silsilah")
    assert text == "Naskah ini memuat silsilah raja-raja Mataram."
    assert provider.calls[0].temperature == 0.7
    assert provider.calls[0].json_mode is False
    assert "silsilah" in provider.calls[0].prompt


async def test_description_rejects_empty_text() -> None:
    client, _ = make_client("   ")
    with pytest.raises(AugmentationError) as excinfo:
        await client.generate_description("Babad")
    assert excinfo.value.kind is AugmentationErrorKind.MALFORMED_RESPONSE
    assert excinfo.value.operation == "generate_description"


async def test_title_ideas_returns_strings() -> None:
    ideas = ["Merawat Lontar", "Jejak Aksara Kawi"]
    client, provider = make_client("```json\n" + json.dumps(ideas) + "\n```")
    assert await client.generate_title_ideas("konservasi") == ideas
    assert 'Focus on the topic: "konservasi"' in provider.calls[0].prompt


@pytest.mark.parametrize("text", ['{"titles": ["a"]}', '["a", 2]', "not json"])
async def test_title_ideas_rejects_unexpected_shapes(text: str) -> None:
    client, _ = make_client(text)
    with pytest.raises(AugmentationError) as excinfo:
        await client.generate_title_ideas()
    assert excinfo.value.kind is AugmentationErrorKind.MALFORMED_RESPONSE


async def test_title_ideas_shape_message() -> None:
    client, _ = make_client('["a", 2]')
    with pytest.raises(AugmentationError, match="unexpected response shape"):
        await client.generate_title_ideas()


async def test_summarize_text() -> None:
    client, provider = make_client("Ringkasan singkat.")
    assert await client.summarize_text("Teks panjang tentang naskah.") == "Ringkasan singkat."
    assert "Teks panjang" in provider.calls[0].prompt


async def test_grounded_search_returns_citations() -> None:
    citations = [
        Citation(kind=CitationKind.WEB, source=GroundingSource(uri="https://perpusnas.go.id", title="Perpusnas")),
        Citation(kind=CitationKind.RETRIEVED_CONTEXT, source=GroundingSource(uri=None, title="Arsip")),
    ]
    response = ProviderResponse(text="Jawaban.", raw=None, model="mock", citations=citations)
    client, provider = make_client(response)

    answer = await client.grounded_search("Di mana naskah Negarakertagama disimpan?")

    assert answer.text == "Jawaban."
    assert answer.sources == citations
    assert provider.calls[0].enable_web_search is True


async def test_grounded_search_without_metadata_has_no_sources() -> None:
    client, _ = make_client("Jawaban tanpa sumber.")
    answer = await client.grounded_search("pertanyaan")
    assert answer.sources == []


async def test_grounded_search_requires_search_capability() -> None:
    client, provider = make_client("x", supports_web_search=False)
    with pytest.raises(AugmentationError) as excinfo:
        await client.grounded_search("pertanyaan")
    assert excinfo.value.kind is AugmentationErrorKind.UNAVAILABLE
    assert provider.calls == []


async def test_unavailable_guard_makes_no_calls() -> None:
    provider = MockProvider()
    client = AugmentationClient(AvailabilityGuard.disabled(), provider=provider)
    assert not client.is_available()

    for call in (
        client.autofill_manuscript("Babad"),
        client.generate_description("Babad"),
        client.generate_title_ideas(),
        client.summarize_text("teks"),
    ):
        with pytest.raises(AugmentationError) as excinfo:
            await call
        assert excinfo.value.kind is AugmentationErrorKind.UNAVAILABLE

    answer = await client.grounded_search("pertanyaan")
    assert answer.sources == []
    assert "tidak tersedia" in answer.text
    assert provider.calls == []


@pytest.mark.parametrize(
    "failure,kind",
    [
        (ProviderTransportError("503 Service Unavailable"), AugmentationErrorKind.TRANSPORT_FAILURE),
        (ProviderResponseError("missing text"), AugmentationErrorKind.MALFORMED_RESPONSE),
    ],
)
async def test_provider_failures_are_wrapped(failure, kind) -> None:
    client, _ = make_client(failure)
    with pytest.raises(AugmentationError) as excinfo:
        await client.autofill_manuscript("Babad")
    assert excinfo.value.kind is kind
    assert excinfo.value.__cause__ is failure
