"""modelhub — model catalog and provider/model resolution for coding agents."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from modelhub.core.catalog.registry import ModelRegistry as ModelRegistry
    from modelhub.core.catalog.registry_data import build_default_registry as build_default_registry
    from modelhub.core.catalog.resolver import ProviderModelResolver as ProviderModelResolver

_LAZY_EXPORTS = {
    "ModelRegistry": "modelhub.core.catalog.registry",
    "ProviderModelResolver": "modelhub.core.catalog.resolver",
    "build_default_registry": "modelhub.core.catalog.registry_data",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'modelhub' has no attribute {name!r}")
