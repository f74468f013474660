"""Availability of the generative service, decided once at start-up."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sampurnan_providers import ProviderConfig, load_provider_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityGuard:
    """Immutable flag derived from whether a provider credential is present.

    Build it once (``from_env`` at start-up, or directly in tests) and pass it
    to :class:`~sampurnan_augmentation.client.AugmentationClient`.
    """

    provider_config: ProviderConfig | None = None

    @classmethod
    def from_config(cls, config: ProviderConfig | None) -> "AvailabilityGuard":
        guard = cls(provider_config=config)
        if not guard.is_available():
            provider = config.name if config else "none"
            logger.warning(
                "Generative service credential not configured; augmentation disabled",
                extra={"provider": provider},
            )
        return guard

    @classmethod
    def from_env(cls) -> "AvailabilityGuard":
        return cls.from_config(load_provider_config())

    @classmethod
    def disabled(cls) -> "AvailabilityGuard":
        return cls(provider_config=None)

    def is_available(self) -> bool:
        return self.provider_config is not None and self.provider_config.has_credentials
