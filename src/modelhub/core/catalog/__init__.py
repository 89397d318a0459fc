"""Model catalog: registry, provider aliases, and resolution."""

from modelhub.core.catalog.errors import (
    DuplicateDefaultError,
    EmptyBackendError,
    InvalidSyntaxError,
    ModelNotFoundError,
    ModelRegistryError,
    RegistryMisconfiguredError,
    UnknownBaseModelError,
)
from modelhub.core.catalog.models import CostTier, ModelCapabilities, ModelConfig
from modelhub.core.catalog.providers import ProviderMetadata, get_provider_metadata
from modelhub.core.catalog.registry import FALLBACK_DEFAULT_MODEL_ID, ModelRegistry
from modelhub.core.catalog.registry_data import DEFAULT_PROVIDER, build_default_registry
from modelhub.core.catalog.resolver import ProviderModelResolver
from modelhub.core.catalog.syntax import parse_provider_model_syntax

__all__ = [
    "DEFAULT_PROVIDER",
    "FALLBACK_DEFAULT_MODEL_ID",
    "CostTier",
    "DuplicateDefaultError",
    "EmptyBackendError",
    "InvalidSyntaxError",
    "ModelCapabilities",
    "ModelConfig",
    "ModelNotFoundError",
    "ModelRegistry",
    "ModelRegistryError",
    "ProviderMetadata",
    "ProviderModelResolver",
    "RegistryMisconfiguredError",
    "UnknownBaseModelError",
    "build_default_registry",
    "get_provider_metadata",
    "parse_provider_model_syntax",
]
