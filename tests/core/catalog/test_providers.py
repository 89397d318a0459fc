"""Tests for provider metadata."""

from __future__ import annotations

import pytest

from modelhub.core.catalog.providers import KNOWN_PROVIDERS, get_provider_metadata


class TestProviderMetadata:
    def test_known_provider(self) -> None:
        meta = get_provider_metadata("gemini")
        assert meta.display_name == "Gemini API"
        assert meta.requirements == ("GOOGLE_API_KEY",)

    def test_lookup_case_insensitive(self) -> None:
        assert get_provider_metadata("VertexAI") is KNOWN_PROVIDERS["vertexai"]

    def test_unknown_provider_generic(self) -> None:
        meta = get_provider_metadata("local-lab")
        assert meta.name == "local-lab"
        assert meta.display_name == "local-lab"
        assert meta.requirements == ()
        assert meta.is_configured({})

    def test_configured_from_env(self) -> None:
        meta = get_provider_metadata("vertexai")
        env = {"GOOGLE_CLOUD_PROJECT": "proj", "GOOGLE_CLOUD_LOCATION": "us-central1"}
        assert meta.is_configured(env)
        assert meta.missing_requirements(env) == []

    def test_empty_value_counts_as_missing(self) -> None:
        meta = get_provider_metadata("vertexai")
        env = {"GOOGLE_CLOUD_PROJECT": "proj", "GOOGLE_CLOUD_LOCATION": ""}
        assert not meta.is_configured(env)
        assert meta.missing_requirements(env) == ["GOOGLE_CLOUD_LOCATION"]

    def test_reads_process_env_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert get_provider_metadata("openai").is_configured()
        monkeypatch.delenv("OPENAI_API_KEY")
        assert not get_provider_metadata("openai").is_configured()

    def test_ollama_needs_nothing(self) -> None:
        assert get_provider_metadata("ollama").is_configured({})
