"""Per-invocation CLI state — the registry built for this command run."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path  # noqa: TC003

from modelhub.cli_commands._output import console
from modelhub.core.catalog.errors import ModelRegistryError
from modelhub.core.catalog.registry import ModelRegistry  # noqa: TC001
from modelhub.core.catalog.registry_data import DEFAULT_PROVIDER
from modelhub.sdk.errors import CatalogValidationError
from modelhub.sdk.loader import load_registry
from modelhub.sdk.models import CatalogSpec  # noqa: TC001


@dataclass
class CLIState:
    """Lazily builds one registry per CLI invocation."""

    catalog_path: Path | None = None
    _registry: ModelRegistry | None = field(default=None, repr=False)
    _catalog: CatalogSpec | None = field(default=None, repr=False)

    def registry(self) -> ModelRegistry:
        """Return the registry, exiting with status 1 on a bad catalog."""
        if self._registry is None:
            try:
                self._registry, self._catalog = load_registry(self.catalog_path)
            except (CatalogValidationError, ModelRegistryError) as exc:
                console.print(f"[red]Catalog error:[/red] {exc}")
                sys.exit(1)
        return self._registry

    def default_provider(self) -> str:
        """The catalog's ``default_provider``, else the built-in default."""
        self.registry()
        if self._catalog is not None and self._catalog.default_provider:
            return self._catalog.default_provider
        return DEFAULT_PROVIDER
