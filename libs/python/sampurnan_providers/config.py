"""Configuration models and helpers for provider selection."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ProviderConfigError

PROVIDER_ENV_VAR = "LLM_PROVIDER"
DEFAULT_PROVIDER = "gemini"
DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "mock": "mock",
}


class ProviderSettings(BaseModel):
    """Per-call default parameters."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(0.4, ge=0, le=2)
    max_output_tokens: int | None = Field(None, ge=16)
    top_p: float | None = Field(None, ge=0, le=1)


class ProviderConfig(BaseModel):
    """Configuration for a single provider instance.

    ``api_key`` may be absent: an unconfigured provider is a supported state
    that disables augmentation rather than failing start-up.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    api_key: str | None = None
    model: str
    settings: ProviderSettings = Field(default_factory=ProviderSettings)

    @property
    def has_credentials(self) -> bool:
        if self.name == "mock":
            return True
        return bool(self.api_key and self.api_key.strip())


def load_provider_config(prefix: str | None = None) -> ProviderConfig:
    """Load configuration from environment variables.

    Args:
        prefix: Optional prefix for environment variables (default uses the
            provider named by ``LLM_PROVIDER``, falling back to ``gemini``).

    Environment variables used (assuming prefix "GEMINI"):
        GEMINI_API_KEY (optional; absent means augmentation is unavailable)
        GEMINI_MODEL (optional, defaults per provider)
        GEMINI_TEMPERATURE (optional)
        GEMINI_MAX_OUTPUT_TOKENS (optional)
        GEMINI_TOP_P (optional)

    Raises:
        ProviderConfigError: If a numeric variable cannot be parsed or no
            model can be determined.
    """

    provider_name = (prefix or os.getenv(PROVIDER_ENV_VAR) or DEFAULT_PROVIDER).strip().upper()

    def read_env(key: str, default: Any | None = None) -> Any:
        value = os.getenv(f"{provider_name}_{key}")
        if value is None or not value.strip():
            return default
        return value.strip()

    model = read_env("MODEL", DEFAULT_MODELS.get(provider_name.lower()))
    if not model:
        raise ProviderConfigError(f"{provider_name}_MODEL is not configured")

    try:
        temperature = float(read_env("TEMPERATURE", 0.4))
    except ValueError as exc:
        raise ProviderConfigError(f"{provider_name}_TEMPERATURE must be a float") from exc

    max_output_tokens = None
    max_output_raw = read_env("MAX_OUTPUT_TOKENS")
    if max_output_raw is not None:
        try:
            parsed_max = int(max_output_raw)
        except ValueError as exc:
            raise ProviderConfigError(
                f"{provider_name}_MAX_OUTPUT_TOKENS must be a positive integer"
            ) from exc
        max_output_tokens = parsed_max if parsed_max > 0 else None

    top_p = None
    top_p_raw = read_env("TOP_P")
    if top_p_raw is not None:
        try:
            top_p = float(top_p_raw)
        except ValueError as exc:
            raise ProviderConfigError(f"{provider_name}_TOP_P must be a float between 0 and 1") from exc

    settings = ProviderSettings(
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        top_p=top_p,
    )
    return ProviderConfig(
        name=provider_name.lower(),
        api_key=read_env("API_KEY"),
        model=model,
        settings=settings,
    )
