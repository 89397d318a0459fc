"""Tests for ``modelhub models`` and the top-level group."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from modelhub.cli import main

if TYPE_CHECKING:
    from pathlib import Path


class TestMainGroup:
    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        for name in ("models", "providers", "resolve", "show", "ollama"):
            assert name in result.output


class TestModelsCommand:
    def test_table(self) -> None:
        result = CliRunner().invoke(main, ["models"])
        assert result.exit_code == 0
        assert "Available Models" in result.output
        assert "gemini-2.5-flash" in result.output

    def test_json(self) -> None:
        result = CliRunner().invoke(main, ["models", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        ids = [m["id"] for m in data]
        assert "gemini-2.5-flash" in ids
        assert "gpt-5" in ids
        assert "llama2" in ids

    def test_backend_filter(self) -> None:
        result = CliRunner().invoke(main, ["models", "--backend", "ollama", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert {m["backend"] for m in data} == {"ollama"}
        assert all(m["capabilities"]["cost_tier"] == "free" for m in data)

    def test_unknown_backend(self) -> None:
        result = CliRunner().invoke(main, ["models", "--backend", "bedrock"])
        assert result.exit_code == 0
        assert "No models registered for backend: bedrock" in result.output

    def test_catalog_models_listed(self, tmp_path: Path) -> None:
        catalog = tmp_path / "models.yaml"
        catalog.write_text("models:\n  - id: my-finetune\n    name: My Finetune\n    backend: openai\n")
        result = CliRunner().invoke(
            main, ["--catalog", str(catalog), "models", "--backend", "openai", "--format", "json"]
        )
        assert result.exit_code == 0
        assert "my-finetune" in [m["id"] for m in json.loads(result.output)]

    def test_bad_catalog(self, tmp_path: Path) -> None:
        catalog = tmp_path / "models.yaml"
        catalog.write_text("models: [unclosed")
        result = CliRunner().invoke(main, ["--catalog", str(catalog), "models"])
        assert result.exit_code == 1
        assert "Catalog error" in result.output

    def test_missing_catalog(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(main, ["--catalog", str(tmp_path / "nope.yaml"), "models"])
        assert result.exit_code == 1
        assert "not found" in result.output
