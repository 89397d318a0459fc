"""Live model discovery from locally running providers."""

from modelhub.core.discovery.errors import DiscoveryError
from modelhub.core.discovery.ollama import OllamaDiscovery, register_discovered

__all__ = [
    "DiscoveryError",
    "OllamaDiscovery",
    "register_discovered",
]
