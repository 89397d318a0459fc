"""OllamaDiscovery — list models installed on a local Ollama server.

Ollama can serve any model a user has pulled, so the static catalog only
covers popular ones.  This client asks the server what is actually
installed (``GET /api/tags``) and turns each entry into a
:class:`ModelConfig`, caching the result for ``cache_ttl`` seconds.

Usage::

    async with OllamaDiscovery() as discovery:
        models = await discovery.list_models()
    register_discovered(registry, models)
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from modelhub.core.catalog.models import CostTier, ModelCapabilities, ModelConfig
from modelhub.core.discovery.errors import DiscoveryError
from modelhub.utils.telemetry import ATTR_DISCOVERED_COUNT, ATTR_PROVIDER, get_tracer

if TYPE_CHECKING:
    from modelhub.core.catalog.registry import ModelRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

PROVIDER = "ollama"
DEFAULT_BASE_URL = "http://localhost:11434"
DEFAULT_CACHE_TTL = 300.0

_VISION_KEYWORDS = ("vision", "llava", "minichat", "bakllava")
# (keyword, context window), first match wins
_CONTEXT_WINDOWS: tuple[tuple[str, int], ...] = (
    ("mistral", 32_000),
    ("gpt-oss", 128_000),
    ("claude", 200_000),
)
_DEFAULT_CONTEXT_WINDOW = 4096


class OllamaModelDetails(BaseModel):
    """The ``details`` block of an ``/api/tags`` entry."""

    family: str = ""
    parameter_size: str = ""
    quantization_level: str = ""


class OllamaTag(BaseModel):
    """One entry of the ``/api/tags`` response."""

    name: str
    size: int = 0
    modified_at: str = ""
    details: OllamaModelDetails = Field(default_factory=OllamaModelDetails)


def detect_capabilities(name: str, family: str = "") -> tuple[ModelCapabilities, int]:
    """Infer capabilities and context window from a model's name and family.

    Ollama reports little metadata, so this is a keyword heuristic.  Every
    model is assumed to support tool calling.
    """
    haystack = f"{name} {family}".lower()
    vision = any(keyword in haystack for keyword in _VISION_KEYWORDS)
    context_window = _DEFAULT_CONTEXT_WINDOW
    for keyword, window in _CONTEXT_WINDOWS:
        if keyword in haystack:
            context_window = window
            break
    caps = ModelCapabilities(
        vision_support=vision,
        tool_use_support=True,
        long_context_window=context_window >= 32_000,
        cost_tier=CostTier.FREE,
    )
    return caps, context_window


def normalize_base_url(base_url: str) -> str:
    """Accept ``OLLAMA_HOST``-style values such as ``127.0.0.1:11434``.

    A value without a scheme gets ``http://``; trailing slashes are dropped.
    """
    url = base_url.strip().rstrip("/")
    if "://" not in url:
        url = f"http://{url}"
    return url


def format_size(num_bytes: int) -> str:
    """Render a byte count the way ``ollama list`` does (``3.8 GB``)."""
    for unit, factor in (("GB", 1024**3), ("MB", 1024**2), ("KB", 1024)):
        if num_bytes >= factor:
            return f"{num_bytes / factor:.1f} {unit}"
    return f"{num_bytes} B"


def tag_to_config(tag: OllamaTag) -> ModelConfig:
    """Convert an ``/api/tags`` entry into a :class:`ModelConfig`."""
    caps, context_window = detect_capabilities(tag.name, tag.details.family)
    details = [part for part in (tag.details.parameter_size, tag.details.quantization_level) if part]
    display = f"{tag.name} ({', '.join(details)})" if details else tag.name
    description = f"Local {tag.details.family or 'Ollama'} model"
    if tag.size:
        description += f", {format_size(tag.size)} on disk"
    return ModelConfig(
        id=tag.name,
        name=tag.name,
        display_name=display,
        backend=PROVIDER,
        context_window=context_window,
        capabilities=caps,
        description=description,
    )


class OllamaDiscovery:
    """Async client for a local Ollama server with a TTL-cached model list."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        timeout: float = 5.0,
    ) -> None:
        self._base_url = normalize_base_url(base_url)
        self._cache_ttl = cache_ttl
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()
        self._cached: list[ModelConfig] | None = None
        self._cached_at = 0.0

    async def __aenter__(self) -> OllamaDiscovery:
        self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "OllamaDiscovery must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    def _cache_valid(self) -> bool:
        return self._cached is not None and (time.monotonic() - self._cached_at) < self._cache_ttl

    async def list_models(self, force_refresh: bool = False) -> list[ModelConfig]:
        """Return installed models, served from cache while it is fresh.

        Raises:
            DiscoveryError: If the server is unreachable or replies with
                something that is not a tag list.
        """
        if not force_refresh and self._cache_valid():
            assert self._cached is not None
            return list(self._cached)

        async with self._lock:
            # Another task may have refreshed while we waited.
            if not force_refresh and self._cache_valid():
                assert self._cached is not None
                return list(self._cached)

            with _tracer.start_as_current_span("modelhub.discovery.ollama") as span:
                span.set_attribute(ATTR_PROVIDER, PROVIDER)
                models = await self._fetch()
                span.set_attribute(ATTR_DISCOVERED_COUNT, len(models))

            self._cached = models
            self._cached_at = time.monotonic()
            logger.info("Discovered %d Ollama model(s) at %s", len(models), self._base_url)
            return list(models)

    def invalidate_cache(self) -> None:
        """Force the next :meth:`list_models` call to hit the server."""
        self._cached_at = 0.0

    async def _fetch(self) -> list[ModelConfig]:
        try:
            response = await self._http().get("/api/tags")
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPError as exc:
            raise DiscoveryError(PROVIDER, str(exc)) from exc
        except ValueError as exc:
            raise DiscoveryError(PROVIDER, f"invalid JSON: {exc}") from exc

        if not isinstance(payload, dict) or not isinstance(payload.get("models"), list):
            raise DiscoveryError(PROVIDER, "response has no 'models' list")

        models: list[ModelConfig] = []
        for entry in payload["models"]:
            try:
                tag = OllamaTag.model_validate(entry)
                models.append(tag_to_config(tag))
            except ValidationError as exc:
                logger.warning("Skipping malformed Ollama model entry %r: %s", entry, exc)
        return models


def register_discovered(registry: ModelRegistry, models: list[ModelConfig]) -> int:
    """Register discovered models and expose each under the ``ollama`` provider.

    Models already indexed under ``ollama`` are refreshed but not indexed
    twice.  Returns the number of models registered.
    """
    offered = {m.id for m in registry.get_provider_models(PROVIDER)}
    for config in models:
        registry.register_model(config)
        if config.id not in offered:
            registry.register_model_for_provider(PROVIDER, config.id)
    logger.debug("Registered %d discovered Ollama model(s)", len(models))
    return len(models)
