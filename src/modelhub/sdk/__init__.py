"""modelhub SDK — catalog files layered on the built-in model registry."""

from modelhub.sdk.errors import CatalogValidationError
from modelhub.sdk.loader import CatalogLoader, apply_catalog, default_catalog_path, load_registry
from modelhub.sdk.models import AliasEntry, CatalogSpec

__all__ = [
    "AliasEntry",
    "CatalogLoader",
    "CatalogSpec",
    "CatalogValidationError",
    "apply_catalog",
    "default_catalog_path",
    "load_registry",
]
