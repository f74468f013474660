"""Shared pytest configuration for the Sampurnan catalog."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
for extra in (ROOT, ROOT / "libs/python"):
    if str(extra) not in sys.path:
        sys.path.insert(0, str(extra))

from sampurnan_catalog import CatalogService, SupabaseStore  # noqa: E402
from tests.utils.fake_supabase import FakeSupabaseClient  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def store(fake_client: FakeSupabaseClient) -> SupabaseStore:
    return SupabaseStore(fake_client)  # type: ignore[arg-type]


@pytest.fixture
def catalog(store: SupabaseStore) -> CatalogService:
    return CatalogService(store)
