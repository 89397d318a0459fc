"""Provider/model resolver — free-form user text to a concrete ``ModelConfig``.

The resolver is stateless apart from the registry it reads and the
provider it substitutes when the user omits one::

    resolver = ProviderModelResolver(registry, default_provider="gemini")
    resolver.resolve("flash")           # same as "gemini/flash"
    resolver.resolve("vertexai/1.5-pro")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from modelhub.core.catalog.errors import ModelNotFoundError
from modelhub.core.catalog.syntax import SEPARATOR, extract_shorthand, parse_provider_model_syntax
from modelhub.utils.telemetry import ATTR_INPUT, ATTR_PROVIDER, get_tracer, record_model

if TYPE_CHECKING:
    from modelhub.core.catalog.models import ModelConfig
    from modelhub.core.catalog.registry import ModelRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ProviderModelResolver:
    """Resolve ``provider/model`` text against a :class:`ModelRegistry`."""

    def __init__(self, registry: ModelRegistry, default_provider: str = "gemini") -> None:
        self.registry = registry
        self.default_provider = default_provider

    def resolve(self, text: str) -> ModelConfig:
        """Parse *text* and resolve it.

        Raises:
            InvalidSyntaxError: If *text* is empty or has a bad slash layout.
            ModelNotFoundError: If no alias or provider-offered id matches.
        """
        with _tracer.start_as_current_span("modelhub.resolve") as span:
            span.set_attribute(ATTR_INPUT, text)
            provider, identifier = parse_provider_model_syntax(text)
            effective = provider or self.default_provider
            span.set_attribute(ATTR_PROVIDER, effective)
            try:
                config = self.registry.resolve_from_provider_syntax(
                    provider, identifier, self.default_provider
                )
            except ModelNotFoundError:
                logger.debug("No model for %r under provider %s", identifier, effective)
                raise
            record_model(span, config)
            return config

    def try_resolve(self, text: str) -> ModelConfig | None:
        """Like :meth:`resolve`, but ``None`` when the model is unknown.

        Syntax errors still raise.
        """
        try:
            return self.resolve(text)
        except ModelNotFoundError:
            return None

    def suggest_flag(self, text: str, config: ModelConfig) -> str:
        """The ``provider/model`` value a user should pass to ``--model``.

        Text that already names a provider is echoed back; bare names are
        qualified with the default provider and the id's shorthand.
        """
        stripped = text.strip()
        if SEPARATOR in stripped:
            return stripped
        return f"{self.default_provider}{SEPARATOR}{extract_shorthand(config.id)}"
