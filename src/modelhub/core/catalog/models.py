"""Model catalog value objects — capabilities and per-model configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

_VERTEX_SUFFIX = "-vertex"


class CostTier(str, Enum):
    """Relative price bracket of a model."""

    FREE = "free"  # locally hosted (Ollama)
    ECONOMY = "economy"
    STANDARD = "standard"
    PREMIUM = "premium"


class ModelCapabilities(BaseModel):
    """What a model can do, as advertised by its backend."""

    model_config = ConfigDict(frozen=True)

    vision_support: bool = False
    tool_use_support: bool = False
    long_context_window: bool = False
    cost_tier: CostTier = CostTier.STANDARD


class ModelConfig(BaseModel):
    """One invocable model.

    ``id`` is the canonical identifier; provider shorthands resolve to it
    through the registry's alias table.  Instances are frozen so a config
    handed out by the registry can be shared freely between callers.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    display_name: str = ""
    backend: str
    context_window: int = Field(default=0, ge=0)
    capabilities: ModelCapabilities = Field(default_factory=ModelCapabilities)
    description: str = ""
    recommended_for: tuple[str, ...] = ()
    is_default: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_display_name(cls, data: object) -> object:
        if isinstance(data, dict) and not data.get("display_name") and data.get("name"):
            return {**data, "display_name": data["name"]}
        return data

    @property
    def api_model_id(self) -> str:
        """The identifier sent to the backend API.

        Older catalogs registered Vertex AI duplicates as ``<id>-vertex``;
        the API itself only knows the base name.
        """
        if self.id.endswith(_VERTEX_SUFFIX):
            return self.id[: -len(_VERTEX_SUFFIX)]
        return self.id
