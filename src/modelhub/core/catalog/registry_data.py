"""Static model registry data.

Contains the built-in model definitions, the provider alias tables, and a
helper to build a pre-loaded ``ModelRegistry``.  Each base model is
defined once; providers that serve the same model (Gemini API and Vertex
AI) alias it rather than duplicating the definition.
"""

from modelhub.core.catalog.models import CostTier, ModelCapabilities, ModelConfig
from modelhub.core.catalog.registry import ModelRegistry

DEFAULT_PROVIDER = "gemini"

# ---------------------------------------------------------------------------
# Gemini (served by both the Gemini API and Vertex AI)
# ---------------------------------------------------------------------------

GEMINI_MODELS: list[ModelConfig] = [
    ModelConfig(
        id="gemini-2.5-flash",
        name="Gemini 2.5 Flash",
        backend="gemini",
        context_window=1_000_000,
        capabilities=ModelCapabilities(
            vision_support=True,
            tool_use_support=True,
            long_context_window=True,
            cost_tier=CostTier.ECONOMY,
        ),
        description="Fast, affordable multimodal model. Best for real-time applications.",
        recommended_for=("coding", "analysis", "rapid iteration"),
        is_default=True,
    ),
    ModelConfig(
        id="gemini-2.0-flash",
        name="Gemini 2.0 Flash",
        backend="gemini",
        context_window=1_000_000,
        capabilities=ModelCapabilities(
            vision_support=True,
            tool_use_support=True,
            long_context_window=True,
            cost_tier=CostTier.ECONOMY,
        ),
        description="Previous generation fast model. Still powerful and cost-effective.",
        recommended_for=("coding", "prototyping"),
    ),
    ModelConfig(
        id="gemini-1.5-flash",
        name="Gemini 1.5 Flash",
        backend="gemini",
        context_window=1_000_000,
        capabilities=ModelCapabilities(
            vision_support=True,
            tool_use_support=True,
            long_context_window=True,
            cost_tier=CostTier.ECONOMY,
        ),
        description="Earlier flash model with large context window.",
        recommended_for=("coding", "document processing"),
    ),
    ModelConfig(
        id="gemini-1.5-pro",
        name="Gemini 1.5 Pro",
        backend="gemini",
        context_window=2_000_000,
        capabilities=ModelCapabilities(
            vision_support=True,
            tool_use_support=True,
            long_context_window=True,
            cost_tier=CostTier.PREMIUM,
        ),
        description="Advanced reasoning model. Best for complex tasks.",
        recommended_for=("complex reasoning", "analysis", "creative"),
    ),
]

GEMINI_SHORTHANDS: dict[str, tuple[str, ...]] = {
    "gemini-2.5-flash": ("2.5-flash", "flash", "latest"),
    "gemini-2.0-flash": ("2.0-flash",),
    "gemini-1.5-flash": ("1.5-flash",),
    "gemini-1.5-pro": ("1.5-pro", "pro"),
}

# ---------------------------------------------------------------------------
# OpenAI
# ---------------------------------------------------------------------------


def _openai(
    model_id: str,
    name: str,
    *,
    tier: CostTier,
    description: str,
    recommended_for: tuple[str, ...],
    vision: bool = True,
    tools: bool = True,
    display_name: str = "",
) -> ModelConfig:
    return ModelConfig(
        id=model_id,
        name=name,
        display_name=display_name or name,
        backend="openai",
        context_window=128_000,
        capabilities=ModelCapabilities(
            vision_support=vision,
            tool_use_support=tools,
            long_context_window=True,
            cost_tier=tier,
        ),
        description=description,
        recommended_for=recommended_for,
    )


OPENAI_MODELS: list[ModelConfig] = [
    # GPT-5 series
    _openai(
        "gpt-5", "GPT-5",
        tier=CostTier.PREMIUM,
        description="Latest frontier model. Best for coding and agentic tasks across all domains.",
        recommended_for=("coding", "agentic tasks", "complex reasoning", "advanced analysis"),
    ),
    _openai(
        "gpt-5-mini", "GPT-5 Mini",
        tier=CostTier.STANDARD,
        description="Faster, cost-efficient version of GPT-5 for well-defined tasks.",
        recommended_for=("coding", "task completion", "prototyping", "high volume"),
    ),
    _openai(
        "gpt-5-nano", "GPT-5 Nano",
        tier=CostTier.ECONOMY,
        description=(
            "Fastest and most cost-efficient version of GPT-5. "
            "Great for summarization and classification."
        ),
        recommended_for=("summarization", "classification", "rapid iteration", "cost-sensitive"),
    ),
    _openai(
        "gpt-5-pro", "GPT-5 Pro",
        tier=CostTier.PREMIUM,
        description="The smartest and most precise model. Produces the most accurate responses.",
        recommended_for=("precision tasks", "complex analysis", "critical applications"),
    ),
    # GPT-4.1 series
    _openai(
        "gpt-4.1", "GPT-4.1",
        tier=CostTier.STANDARD,
        description="Smartest non-reasoning model. High intelligence for general tasks.",
        recommended_for=("coding", "analysis", "reasoning", "general intelligence"),
    ),
    _openai(
        "gpt-4.1-mini", "GPT-4.1 Mini",
        tier=CostTier.ECONOMY,
        description="Smaller and faster version of GPT-4.1 for focused tasks.",
        recommended_for=("rapid tasks", "cost-effective coding", "prototyping"),
    ),
    _openai(
        "gpt-4.1-nano", "GPT-4.1 Nano",
        tier=CostTier.ECONOMY,
        description="Very small and fast model for simple, focused tasks.",
        recommended_for=("simple tasks", "low cost", "high volume"),
    ),
    _openai(
        "gpt-5-codex", "GPT-5 Codex",
        tier=CostTier.PREMIUM,
        vision=False,
        description="Specialized version of GPT-5 optimized for agentic coding.",
        recommended_for=("coding", "code generation", "programming agents"),
    ),
    # Reasoning models (o-series)
    _openai(
        "o4-mini", "o4-mini",
        display_name="o4-mini (Fast Reasoning)",
        tier=CostTier.STANDARD,
        vision=False,
        tools=False,
        description="Fast, cost-efficient reasoning model. Successor to o3-mini.",
        recommended_for=("reasoning", "problem solving", "quick inference"),
    ),
    _openai(
        "o3", "o3",
        display_name="o3 (Deep Reasoning)",
        tier=CostTier.PREMIUM,
        vision=False,
        tools=False,
        description="Reasoning model for complex tasks. Predecessor to GPT-5.",
        recommended_for=("complex reasoning", "mathematics", "deep analysis"),
    ),
    _openai(
        "o3-mini", "o3-mini",
        display_name="o3-mini (Lightweight Reasoning)",
        tier=CostTier.STANDARD,
        vision=False,
        tools=False,
        description="Small reasoning model alternative to o3.",
        recommended_for=("reasoning", "coding", "efficient inference"),
    ),
    # Vision and older models
    _openai(
        "gpt-4o", "GPT-4o",
        tier=CostTier.STANDARD,
        description="Fast, intelligent, flexible model. Multimodal with vision support.",
        recommended_for=("coding", "vision", "analysis", "general tasks"),
    ),
    _openai(
        "gpt-4o-mini", "GPT-4o Mini",
        tier=CostTier.ECONOMY,
        description="Fast, affordable small model for focused tasks.",
        recommended_for=("rapid prototyping", "high volume", "cost-effective"),
    ),
    _openai(
        "o1", "o1",
        display_name="o1 (Previous Reasoning)",
        tier=CostTier.PREMIUM,
        vision=False,
        tools=False,
        description="Previous full o-series reasoning model. Solid for complex tasks.",
        recommended_for=("reasoning", "mathematics", "complex problem solving"),
    ),
    _openai(
        "o1-mini", "o1-mini",
        display_name="o1-mini (Deprecated)",
        tier=CostTier.STANDARD,
        vision=False,
        tools=False,
        description="Small reasoning model alternative to o1 (Deprecated, use o4-mini instead).",
        recommended_for=("reasoning", "cost-effective inference"),
    ),
]

OPENAI_SHORTHANDS: dict[str, tuple[str, ...]] = {
    "gpt-5": ("5", "latest", "best", "frontier"),
    "gpt-5-mini": ("5-mini", "5m"),
    "gpt-5-nano": ("5-nano", "5n"),
    "gpt-5-pro": ("5-pro", "5p"),
    "gpt-4.1": ("4.1",),
    "gpt-4.1-mini": ("4.1-mini", "4.1m"),
    "gpt-4.1-nano": ("4.1-nano", "4.1n"),
    "gpt-5-codex": ("codex", "5-codex"),
    "o4-mini": ("o4-mini", "o4m"),
    "o3": ("o3", "reasoning"),
    "o3-mini": ("o3-mini", "o3m"),
    "gpt-4o": ("4o",),
    "gpt-4o-mini": ("4o-mini", "mini", "fast"),
    "o1": ("o1",),
    "o1-mini": ("o1-mini",),
}

# ---------------------------------------------------------------------------
# Ollama (local, open-weight)
# ---------------------------------------------------------------------------


def _ollama(
    model_id: str,
    name: str,
    display_name: str,
    *,
    context_window: int,
    tools: bool,
    description: str,
    recommended_for: tuple[str, ...],
) -> ModelConfig:
    return ModelConfig(
        id=model_id,
        name=name,
        display_name=display_name,
        backend="ollama",
        context_window=context_window,
        capabilities=ModelCapabilities(
            tool_use_support=tools,
            long_context_window=context_window >= 32_000,
            cost_tier=CostTier.FREE,
        ),
        description=description,
        recommended_for=recommended_for,
    )


OLLAMA_MODELS: list[ModelConfig] = [
    _ollama(
        "llama2", "Llama 2", "Llama 2 (7B)",
        context_window=4096,
        tools=False,
        description="Meta's Llama 2 model. Fast, efficient, open-source.",
        recommended_for=("general purpose", "coding"),
    ),
    _ollama(
        "neural-chat", "Neural Chat", "Neural Chat (7B)",
        context_window=4096,
        tools=False,
        description="Intel's Neural Chat model optimized for conversational tasks.",
        recommended_for=("conversation", "chat", "instruction following"),
    ),
    _ollama(
        "mistral", "Mistral", "Mistral (7B)",
        context_window=32_000,
        tools=False,
        description="Mistral 7B - High-quality open-source model with 32K context.",
        recommended_for=("coding", "analysis", "extended context"),
    ),
    _ollama(
        "dolphin-mixtral", "Dolphin Mixtral", "Dolphin Mixtral (8x7B)",
        context_window=32_000,
        tools=True,
        description="Dolphin Mixtral - High-quality model with function calling support.",
        recommended_for=("coding", "tool use", "complex reasoning"),
    ),
    _ollama(
        "llama2-uncensored", "Llama 2 Uncensored", "Llama 2 Uncensored (7B)",
        context_window=4096,
        tools=False,
        description="Uncensored variant of Llama 2 for unrestricted generation.",
        recommended_for=("creative writing", "unconstrained tasks"),
    ),
    _ollama(
        "openhermes", "OpenHermes 2.5", "OpenHermes 2.5 (7B)",
        context_window=4096,
        tools=True,
        description="OpenHermes 2.5 - Function calling capable model.",
        recommended_for=("instruction following", "tool use"),
    ),
]

OLLAMA_SHORTHANDS: dict[str, tuple[str, ...]] = {
    "llama2": ("llama-2",),
    "neural-chat": (),
    "mistral": (),
    "dolphin-mixtral": (),
    "llama2-uncensored": (),
    "openhermes": ("openhermes-2.5",),
}

# provider -> {canonical id -> shorthands}
PROVIDER_ALIASES: dict[str, dict[str, tuple[str, ...]]] = {
    "gemini": GEMINI_SHORTHANDS,
    "vertexai": GEMINI_SHORTHANDS,
    "openai": OPENAI_SHORTHANDS,
    "ollama": OLLAMA_SHORTHANDS,
}

KNOWN_MODELS: list[ModelConfig] = [*GEMINI_MODELS, *OPENAI_MODELS, *OLLAMA_MODELS]


def build_default_registry() -> ModelRegistry:
    """Return a new ``ModelRegistry`` pre-loaded with the built-in models."""
    registry = ModelRegistry()
    for config in KNOWN_MODELS:
        registry.register_model(config)
    for provider, table in PROVIDER_ALIASES.items():
        for model_id, shorthands in table.items():
            registry.register_model_for_provider(provider, model_id, shorthands)
    return registry
