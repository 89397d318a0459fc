"""Pydantic models for the catalog YAML schema.

Example::

    default_provider: openai
    models:
      - id: my-finetune
        name: My Finetune
        backend: openai
        context_window: 64000
        capabilities:
          tool_use_support: true
          cost_tier: standard
    aliases:
      - provider: openai
        model: my-finetune
        shorthands: [ft]
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from modelhub.core.catalog.models import ModelConfig  # noqa: TC001


class AliasEntry(BaseModel):
    """Expose ``model`` under ``provider``, optionally via shorthands."""

    provider: str = Field(min_length=1)
    model: str = Field(min_length=1)
    shorthands: list[str] = []

    @model_validator(mode="after")
    def _validate_names(self) -> AliasEntry:
        for name in (self.provider, *self.shorthands):
            if not name or "/" in name:
                msg = f"alias names must be non-empty and contain no '/': {name!r}"
                raise ValueError(msg)
        return self


class CatalogSpec(BaseModel):
    """Top-level catalog file parsed from YAML."""

    version: str = "1"
    default_provider: str | None = None
    models: list[ModelConfig] = []
    aliases: list[AliasEntry] = []

    @model_validator(mode="after")
    def _validate_models(self) -> CatalogSpec:
        defaults = [m.id for m in self.models if m.is_default]
        if len(defaults) > 1:
            msg = f"at most one model may be marked default, got {defaults}"
            raise ValueError(msg)

        seen: set[str] = set()
        for model in self.models:
            if model.id in seen:
                msg = f"model '{model.id}' is defined more than once"
                raise ValueError(msg)
            seen.add(model.id)
        return self
