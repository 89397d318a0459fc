"""Tests for ModelCapabilities and ModelConfig."""

import pytest
from pydantic import ValidationError

from modelhub.core.catalog.models import CostTier, ModelCapabilities, ModelConfig


class TestModelCapabilities:
    def test_defaults(self) -> None:
        caps = ModelCapabilities()
        assert caps.vision_support is False
        assert caps.tool_use_support is False
        assert caps.long_context_window is False
        assert caps.cost_tier is CostTier.STANDARD

    def test_cost_tier_from_string(self) -> None:
        caps = ModelCapabilities.model_validate({"cost_tier": "premium"})
        assert caps.cost_tier is CostTier.PREMIUM

    def test_unknown_cost_tier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelCapabilities.model_validate({"cost_tier": "luxury"})

    def test_frozen(self) -> None:
        caps = ModelCapabilities()
        with pytest.raises(ValidationError):
            caps.vision_support = True  # type: ignore[misc]


class TestModelConfig:
    def test_display_name_defaults_to_name(self) -> None:
        config = ModelConfig(id="m-1", name="Model One", backend="gemini")
        assert config.display_name == "Model One"

    def test_explicit_display_name_kept(self) -> None:
        config = ModelConfig(id="o3", name="o3", display_name="o3 (Deep Reasoning)", backend="openai")
        assert config.display_name == "o3 (Deep Reasoning)"

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelConfig(id="", name="Nameless", backend="gemini")

    def test_negative_context_window_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelConfig(id="m", name="m", backend="gemini", context_window=-1)

    def test_recommended_for_is_ordered_tuple(self) -> None:
        config = ModelConfig.model_validate(
            {"id": "m", "name": "m", "backend": "x", "recommended_for": ["coding", "analysis"]}
        )
        assert config.recommended_for == ("coding", "analysis")

    def test_frozen(self) -> None:
        config = ModelConfig(id="m", name="m", backend="gemini")
        with pytest.raises(ValidationError):
            config.is_default = True  # type: ignore[misc]

    def test_api_model_id_strips_vertex_suffix(self) -> None:
        config = ModelConfig(id="gemini-2.5-flash-vertex", name="x", backend="vertexai")
        assert config.api_model_id == "gemini-2.5-flash"

    def test_api_model_id_plain(self) -> None:
        config = ModelConfig(id="gemini-2.5-flash", name="x", backend="gemini")
        assert config.api_model_id == "gemini-2.5-flash"

    def test_json_dump(self) -> None:
        config = ModelConfig(
            id="m",
            name="m",
            backend="gemini",
            capabilities=ModelCapabilities(cost_tier=CostTier.ECONOMY),
            recommended_for=("coding",),
        )
        data = config.model_dump(mode="json")
        assert data["capabilities"]["cost_tier"] == "economy"
        assert data["recommended_for"] == ["coding"]
