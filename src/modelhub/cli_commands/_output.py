"""Shared CLI output formatters."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from rich.console import Console
from rich.table import Table

from modelhub.core.catalog.models import CostTier, ModelConfig  # noqa: TC001
from modelhub.core.catalog.providers import get_provider_metadata
from modelhub.core.catalog.registry import ModelRegistry  # noqa: TC001

console = Console()

_COST_ICONS = {
    CostTier.FREE: "🆓",
    CostTier.ECONOMY: "💵",
    CostTier.STANDARD: "💰",
    CostTier.PREMIUM: "💎",
}


def model_to_dict(model: ModelConfig) -> dict[str, Any]:
    """JSON-ready representation of a model."""
    return model.model_dump(mode="json")


def print_json(data: Any) -> None:
    console.print_json(json.dumps(data, default=str))


def print_models_table(models: Iterable[ModelConfig], *, title: str = "Available Models") -> None:
    """Pretty-print models as a table."""
    table = Table(title=title)
    table.add_column("", no_wrap=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Backend")
    table.add_column("Context", justify="right")
    table.add_column("Tools")
    table.add_column("Vision")
    table.add_column("Cost")
    table.add_column("Description")

    for model in models:
        caps = model.capabilities
        table.add_row(
            "✓" if model.is_default else "○",
            model.id,
            model.backend,
            f"{model.context_window:,}",
            _yes_no(caps.tool_use_support),
            _yes_no(caps.vision_support),
            f"{_COST_ICONS[caps.cost_tier]} {caps.cost_tier.value}",
            _truncate(model.description, 60),
        )

    console.print(table)


def print_providers(
    registry: ModelRegistry,
    *,
    env: Mapping[str, str] | None = None,
) -> None:
    """Print every provider with its setup state and the models it offers."""
    for provider in registry.list_providers():
        meta = get_provider_metadata(provider)
        if meta.is_configured(env):
            status = "[green]configured[/green]"
        else:
            status = f"[yellow]missing {', '.join(meta.missing_requirements(env))}[/yellow]"
        console.print(f"\n{meta.icon} [bold]{meta.display_name}[/bold] ({provider}) — {status}")
        if meta.description:
            console.print(f"   {meta.description}")

        for model in registry.get_provider_models(provider):
            shorthands = registry.shorthands_for(provider, model.id)
            icon = "✓" if model.is_default else "○"
            line = f"   {icon} {provider}/{model.id}"
            if shorthands:
                line += f"  [dim](aliases: {', '.join(shorthands)})[/dim]"
            console.print(line)

    console.print("\n[dim]Usage: --model provider/model (e.g. --model gemini/2.5-flash)[/dim]")
    console.print("[dim]Shorthands work too: --model gemini/flash[/dim]")


def providers_to_dict(
    registry: ModelRegistry,
    *,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """JSON-ready representation of the provider listing."""
    data: dict[str, Any] = {}
    for provider in registry.list_providers():
        meta = get_provider_metadata(provider)
        data[provider] = {
            "display_name": meta.display_name,
            "description": meta.description,
            "configured": meta.is_configured(env),
            "requirements": list(meta.requirements),
            "models": [
                {"id": m.id, "shorthands": registry.shorthands_for(provider, m.id)}
                for m in registry.get_provider_models(provider)
            ],
        }
    return data


def print_model_details(model: ModelConfig) -> None:
    """Full description of a single model."""
    caps = model.capabilities
    console.print(f"\n[bold]Model:[/bold] {model.display_name} ({model.id}, backend={model.backend})")
    if model.description:
        console.print(f"[dim]  {model.description}[/dim]")

    console.print("\n[bold]Capabilities:[/bold]")
    console.print(f"  {_check(caps.vision_support)} Vision/Image Processing")
    console.print(f"  {_check(caps.tool_use_support)} Tool/Function Calling")
    console.print(f"  {_check(caps.long_context_window)} Long Context Window")

    console.print("\n[bold]Technical Details:[/bold]")
    console.print(f"  Context Window: {model.context_window:,} tokens")
    console.print(f"  Cost Tier: {caps.cost_tier.value}")
    console.print(f"  Default: {_yes_no(model.is_default)}")

    if model.recommended_for:
        console.print("\n[bold]Recommended For:[/bold]")
        for use_case in model.recommended_for:
            console.print(f"  • {use_case}")


def print_available_models(registry: ModelRegistry) -> None:
    """Compact ``provider/model`` listing shown after a failed lookup."""
    console.print("\n[bold]Available models:[/bold]")
    for provider in registry.list_providers():
        console.print(f"\n[bold]{provider}:[/bold]")
        for model in registry.get_provider_models(provider):
            console.print(f"  • {provider}/{model.id}")


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _check(flag: bool) -> str:
    return "[green]✓[/green]" if flag else "[red]✗[/red]"


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
