"""Provider metadata — display names and the environment each provider needs."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict


class ProviderMetadata(BaseModel):
    """Human-facing description of an alias provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    icon: str = "○"
    description: str = ""
    requirements: tuple[str, ...] = ()

    def is_configured(self, env: Mapping[str, str] | None = None) -> bool:
        """True when every required environment variable is set and non-empty."""
        source = os.environ if env is None else env
        return all(source.get(var) for var in self.requirements)

    def missing_requirements(self, env: Mapping[str, str] | None = None) -> list[str]:
        """Required environment variables that are unset or empty."""
        source = os.environ if env is None else env
        return [var for var in self.requirements if not source.get(var)]


KNOWN_PROVIDERS: dict[str, ProviderMetadata] = {
    "gemini": ProviderMetadata(
        name="gemini",
        display_name="Gemini API",
        icon="🔷",
        description="REST API with Google's Gemini models",
        requirements=("GOOGLE_API_KEY",),
    ),
    "vertexai": ProviderMetadata(
        name="vertexai",
        display_name="Vertex AI",
        icon="🔶",
        description="GCP-native endpoint for Google's Gemini models",
        requirements=("GOOGLE_CLOUD_PROJECT", "GOOGLE_CLOUD_LOCATION"),
    ),
    "openai": ProviderMetadata(
        name="openai",
        display_name="OpenAI",
        icon="🟢",
        description="OpenAI API (GPT and o-series models)",
        requirements=("OPENAI_API_KEY",),
    ),
    "ollama": ProviderMetadata(
        name="ollama",
        display_name="Ollama",
        icon="🦙",
        description="Locally hosted open-weight models served by Ollama",
    ),
}


def get_provider_metadata(name: str) -> ProviderMetadata:
    """Return metadata for *name* (case-insensitive).

    Unknown providers, e.g. ones added through a catalog file, get a
    generic record with no requirements.
    """
    key = name.strip().lower()
    known = KNOWN_PROVIDERS.get(key)
    if known is not None:
        return known
    return ProviderMetadata(name=name, display_name=name)
