"""Catalog loading — user-defined models and aliases on top of the built-ins."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from modelhub.core.catalog.registry_data import build_default_registry
from modelhub.sdk.errors import CatalogValidationError
from modelhub.sdk.models import CatalogSpec

if TYPE_CHECKING:
    from modelhub.core.catalog.registry import ModelRegistry

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "MODELHUB_CATALOG"
DEFAULT_CATALOG_PATH = Path("~/.modelhub/models.yaml")


def default_catalog_path() -> Path:
    """``$MODELHUB_CATALOG`` if set, else ``~/.modelhub/models.yaml``."""
    override = os.environ.get(CATALOG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CATALOG_PATH.expanduser()


class CatalogLoader:
    """Load and validate a catalog YAML file into a :class:`CatalogSpec`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> CatalogSpec:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.  An empty file
        yields an empty catalog.

        Raises:
            CatalogValidationError: On read errors, YAML parse errors or
                schema validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogValidationError(f"Cannot read {self._path}: {exc}") from exc

        expanded = os.path.expandvars(raw)

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise CatalogValidationError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise CatalogValidationError("Catalog YAML must be a mapping")

        try:
            spec = CatalogSpec.model_validate(data)
        except ValidationError as exc:
            raise CatalogValidationError(str(exc)) from exc

        logger.info(
            "Loaded catalog %s: %d model(s), %d alias entr(ies)",
            self._path,
            len(spec.models),
            len(spec.aliases),
        )
        return spec


def apply_catalog(registry: ModelRegistry, spec: CatalogSpec) -> None:
    """Register the catalog's models, then its aliases, on *registry*.

    Models come first so aliases may target them.  A catalog model marked
    default takes the default slot from the built-in one.  An alias naming a
    model the registry does not hold raises
    :class:`~modelhub.core.catalog.errors.UnknownBaseModelError`.
    """
    for config in spec.models:
        if config.is_default:
            registry.register_model(config.model_copy(update={"is_default": False}))
            registry.set_default(config.id)
            logger.info("Catalog sets default model: %s", config.id)
        else:
            registry.register_model(config)
    for entry in spec.aliases:
        registry.register_model_for_provider(entry.provider, entry.model, entry.shorthands)
    logger.debug("Applied catalog: %d model(s), %d alias entr(ies)", len(spec.models), len(spec.aliases))


def load_registry(path: Path | None = None) -> tuple[ModelRegistry, CatalogSpec | None]:
    """Build the default registry and layer the catalog file on top.

    When *path* is ``None`` the default location is used and a missing
    file is not an error; an explicit *path* must exist.

    Returns the registry and the applied catalog (``None`` if no file).
    """
    registry = build_default_registry()
    explicit = path is not None
    catalog_path = path if path is not None else default_catalog_path()

    if not catalog_path.exists():
        if explicit:
            raise CatalogValidationError(f"Catalog file not found: {catalog_path}")
        logger.debug("No catalog file at %s; using built-in models only", catalog_path)
        return registry, None

    spec = CatalogLoader(catalog_path).load()
    apply_catalog(registry, spec)
    return registry, spec
