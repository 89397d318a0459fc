"""``modelhub resolve`` / ``modelhub show`` — turn user input into a model."""

from __future__ import annotations

import sys

import click

from modelhub.cli_commands._output import (
    console,
    model_to_dict,
    print_available_models,
    print_json,
    print_model_details,
)
from modelhub.cli_commands._state import CLIState
from modelhub.core.catalog.errors import (
    EmptyBackendError,
    InvalidSyntaxError,
    ModelNotFoundError,
    RegistryMisconfiguredError,
)
from modelhub.core.catalog.resolver import ProviderModelResolver


@click.command()
@click.argument("text", metavar="MODEL")
@click.option(
    "--default-provider",
    default=None,
    help="Provider used when MODEL has no 'provider/' prefix (default: catalog setting or gemini).",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.pass_obj
def resolve(state: CLIState, text: str, default_provider: str | None, fmt: str) -> None:
    """Resolve MODEL (``provider/model`` or a bare shorthand) to a model."""
    registry = state.registry()
    resolver = ProviderModelResolver(registry, default_provider or state.default_provider())

    try:
        config = resolver.resolve(text)
    except InvalidSyntaxError as exc:
        console.print(f"[red]{exc}[/red]")
        console.print("Examples: gemini/2.5-flash, gemini/flash, vertexai/1.5-pro, flash")
        sys.exit(1)
    except ModelNotFoundError as exc:
        console.print(f"[red]Model not found:[/red] {exc}")
        print_available_models(registry)
        sys.exit(1)

    suggestion = resolver.suggest_flag(text, config)
    if fmt == "json":
        print_json({"model": model_to_dict(config), "flag": f"--model {suggestion}"})
        return

    console.print(f"[green]✓[/green] {text} → [bold]{config.display_name}[/bold] ({config.id}, {config.backend})")
    console.print(f"  Context window: {config.context_window:,} tokens")
    console.print(f"  Cost tier: {config.capabilities.cost_tier.value}")
    console.print(f"  Use with: --model {suggestion}")


@click.command()
@click.argument("model_id", required=False, default="")
@click.option("--backend", default="", help="Pick the default (or first) model of this backend.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
def show(state: CLIState, model_id: str, backend: str, as_json: bool) -> None:
    """Show details for MODEL_ID, a backend's model, or the default model."""
    registry = state.registry()
    try:
        config = registry.resolve_model(model_id, backend)
    except (ModelNotFoundError, EmptyBackendError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)
    except RegistryMisconfiguredError as exc:
        console.print(f"[red]Fatal:[/red] {exc}")
        sys.exit(2)

    if as_json:
        print_json(model_to_dict(config))
    else:
        print_model_details(config)
