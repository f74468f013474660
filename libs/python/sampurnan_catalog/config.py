"""Store connection settings."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict
from supabase import AsyncClient, acreate_client

from .errors import StoreConfigError

URL_ENV_VAR = "SUPABASE_URL"
KEY_ENV_VAR = "SUPABASE_ANON_KEY"


class StoreSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    anon_key: str

    @classmethod
    def from_env(cls) -> "StoreSettings":
        """Read ``SUPABASE_URL`` and ``SUPABASE_ANON_KEY``.

        Raises:
            StoreConfigError: If either variable is missing or blank.
        """

        url = (os.getenv(URL_ENV_VAR) or "").strip()
        anon_key = (os.getenv(KEY_ENV_VAR) or "").strip()
        if not url or not anon_key:
            raise StoreConfigError(f"{URL_ENV_VAR} and {KEY_ENV_VAR} must be defined in the environment")
        return cls(url=url, anon_key=anon_key)


async def create_store_client(settings: StoreSettings | None = None) -> AsyncClient:
    settings = settings or StoreSettings.from_env()
    return await acreate_client(settings.url, settings.anon_key)
