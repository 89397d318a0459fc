"""Model registry — canonical catalog, provider aliases, and resolution.

The registry owns three maps:

* ``model id -> ModelConfig``
* ``"provider/identifier" -> model id`` (the alias table)
* ``provider -> [model id, ...]`` (the provider index, registration order)

It is populated once at start-up (see
:func:`modelhub.core.catalog.registry_data.build_default_registry`) and
read concurrently afterwards.  Writes take a lock so that late
registration from catalog files or Ollama discovery never races another
writer.

Typical usage::

    registry = build_default_registry()
    registry.resolve_from_provider_syntax("vertexai", "flash", "gemini")
    registry.resolve_model(backend="openai")
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator

from modelhub.core.catalog.errors import (
    DuplicateDefaultError,
    EmptyBackendError,
    InvalidSyntaxError,
    ModelNotFoundError,
    RegistryMisconfiguredError,
    UnknownBaseModelError,
)
from modelhub.core.catalog.models import ModelConfig
from modelhub.core.catalog.syntax import SEPARATOR, alias_key

logger = logging.getLogger(__name__)

# Used by get_default_model() when no registered model is flagged default.
FALLBACK_DEFAULT_MODEL_ID = "gemini-2.5-flash"


class ModelRegistry:
    """Registry of invocable models and their provider-scoped aliases."""

    def __init__(self) -> None:
        self._models: dict[str, ModelConfig] = {}
        self._aliases: dict[str, str] = {}
        self._models_by_provider: dict[str, list[str]] = {}
        self._write_lock = threading.Lock()

    # ── Model registration & lookup ───────────────────────────

    def register_model(self, config: ModelConfig) -> None:
        """Register *config*, replacing any model with the same id.

        Raises:
            DuplicateDefaultError: If *config* is flagged default while a
                different model already holds the default slot.
        """
        with self._write_lock:
            if config.is_default:
                current = self._find_default()
                if current is not None and current.id != config.id:
                    raise DuplicateDefaultError(current.id, config.id)
            if config.id in self._models:
                logger.debug("Model %s re-registered; previous entry replaced", config.id)
            self._models[config.id] = config
        logger.debug(
            "Model registered: %s (backend=%s, tier=%s, default=%s)",
            config.id,
            config.backend,
            config.capabilities.cost_tier.value,
            config.is_default,
        )

    def set_default(self, model_id: str) -> ModelConfig:
        """Make *model_id* the default model, demoting the current one.

        Returns the newly flagged config.

        Raises:
            ModelNotFoundError: If *model_id* is not registered.
        """
        with self._write_lock:
            target = self._models.get(model_id)
            if target is None:
                raise ModelNotFoundError(model_id)
            current = self._find_default()
            if current is not None and current.id != model_id:
                self._models[current.id] = current.model_copy(update={"is_default": False})
            if not target.is_default:
                target = target.model_copy(update={"is_default": True})
                self._models[model_id] = target
        logger.debug(
            "Default model set to %s (was %s)",
            model_id,
            current.id if current is not None else None,
        )
        return target

    def get_model(self, model_id: str) -> ModelConfig:
        """Return the model registered under *model_id*.

        Raises:
            ModelNotFoundError: If no such model is registered.
        """
        try:
            return self._models[model_id]
        except KeyError:
            raise ModelNotFoundError(model_id) from None

    def get_model_by_name(self, name: str) -> ModelConfig:
        """Look a model up by its ``name`` field, ignoring case."""
        wanted = name.lower()
        for model in self._models.values():
            if model.name.lower() == wanted:
                return model
        raise ModelNotFoundError(name)

    def get_default_model(self) -> ModelConfig:
        """Return the default model.

        Falls back to :data:`FALLBACK_DEFAULT_MODEL_ID` when nothing is
        flagged default.

        Raises:
            RegistryMisconfiguredError: If neither exists.
        """
        default = self._find_default()
        if default is not None:
            return default
        fallback = self._models.get(FALLBACK_DEFAULT_MODEL_ID)
        if fallback is not None:
            logger.debug("No default model flagged; using fallback %s", FALLBACK_DEFAULT_MODEL_ID)
            return fallback
        raise RegistryMisconfiguredError(
            f"no default model flagged and fallback {FALLBACK_DEFAULT_MODEL_ID!r} is not registered"
        )

    def list_models(self) -> list[ModelConfig]:
        """All registered models, in registration order."""
        return list(self._models.values())

    def list_models_by_backend(self, backend: str) -> list[ModelConfig]:
        """Registered models whose backend is exactly *backend*."""
        return [m for m in self._models.values() if m.backend == backend]

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._models

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[ModelConfig]:
        return iter(self.list_models())

    # ── Provider aliases ──────────────────────────────────────

    def register_model_for_provider(
        self,
        provider: str,
        canonical_id: str,
        shorthands: Iterable[str] = (),
    ) -> None:
        """Expose *canonical_id* under *provider*, optionally via shorthands.

        ``provider/canonical_id`` is always registered; each shorthand adds
        ``provider/shorthand``.  Re-registering an existing key replaces
        its target; the provider index keeps every registration, so a
        repeated call lists the model twice.

        Raises:
            UnknownBaseModelError: If *canonical_id* is not registered.
            InvalidSyntaxError: If the provider is empty, or the provider or
                a shorthand contains ``/`` (such keys could never resolve).
        """
        names = list(shorthands)
        for part in (provider, *names):
            if not part or SEPARATOR in part:
                raise InvalidSyntaxError(part, "aliases must be non-empty and slash-free")

        with self._write_lock:
            if canonical_id not in self._models:
                raise UnknownBaseModelError(canonical_id)
            self._aliases[alias_key(provider, canonical_id)] = canonical_id
            for shorthand in names:
                self._aliases[alias_key(provider, shorthand)] = canonical_id
            self._models_by_provider.setdefault(provider, []).append(canonical_id)

        logger.debug("Provider alias registered: %s/%s shorthands=%s", provider, canonical_id, names)

    def list_providers(self) -> list[str]:
        """Provider names with at least one registered model, sorted."""
        return sorted(self._models_by_provider)

    def get_provider_models(self, provider: str) -> list[ModelConfig]:
        """Models reachable through *provider*, in registration order."""
        return [
            self._models[model_id]
            for model_id in self._models_by_provider.get(provider, [])
            if model_id in self._models
        ]

    def list_aliases(self) -> dict[str, str]:
        """Return a copy of the ``provider/identifier -> model id`` table."""
        return dict(self._aliases)

    def shorthands_for(self, provider: str, model_id: str) -> list[str]:
        """Shorthands that resolve to *model_id* under *provider*.

        The implicit ``provider/model_id`` key is not included.
        """
        prefix = provider + SEPARATOR
        return [
            key[len(prefix):]
            for key, target in self._aliases.items()
            if target == model_id and key.startswith(prefix) and key[len(prefix):] != model_id
        ]

    # ── Resolution ────────────────────────────────────────────

    def resolve_from_provider_syntax(
        self,
        provider: str,
        identifier: str,
        default_provider: str,
    ) -> ModelConfig:
        """Resolve an already-parsed ``provider/identifier`` pair.

        Lookup order:
        1. Alias table key ``provider/identifier``
        2. Exact model id, but only if that id is indexed under *provider*

        An empty *provider* is replaced by *default_provider* first.

        Raises:
            ModelNotFoundError: Carrying both *identifier* and the
                effective provider.
        """
        if not provider:
            provider = default_provider

        target = self._aliases.get(alias_key(provider, identifier))
        if target is not None:
            logger.debug("Resolved %s/%s via alias -> %s", provider, identifier, target)
            return self.get_model(target)

        model = self._models.get(identifier)
        if model is not None:
            if identifier in self._models_by_provider.get(provider, []):
                logger.debug("Resolved %s/%s via exact id", provider, identifier)
                return model
            logger.debug("Model %s exists but is not offered by provider %s", identifier, provider)

        raise ModelNotFoundError(identifier, provider)

    def resolve_model(self, model_id: str = "", backend: str = "") -> ModelConfig:
        """Pick a model from an explicit id, a backend name, or the default.

        Precedence: explicit *model_id* > explicit *backend* > global
        default.  For a backend, the model flagged default wins, otherwise
        the first one registered.

        Raises:
            ModelNotFoundError: If *model_id* is given but unknown.
            EmptyBackendError: If *backend* has no registered models.
        """
        if model_id:
            return self.get_model(model_id)

        if backend:
            candidates = self.list_models_by_backend(backend)
            if not candidates:
                raise EmptyBackendError(backend)
            for model in candidates:
                if model.is_default:
                    return model
            return candidates[0]

        return self.get_default_model()

    # ── Internal ──────────────────────────────────────────────

    def _find_default(self) -> ModelConfig | None:
        for model in self._models.values():
            if model.is_default:
                return model
        return None
