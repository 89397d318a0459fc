"""``modelhub models`` — list registered models."""

from __future__ import annotations

import click

from modelhub.cli_commands._output import console, model_to_dict, print_json, print_models_table
from modelhub.cli_commands._state import CLIState


@click.command()
@click.option("--backend", default=None, help="Only show models of this backend (e.g. gemini, openai).")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format.",
)
@click.pass_obj
def models(state: CLIState, backend: str | None, fmt: str) -> None:
    """List all registered models."""
    registry = state.registry()
    found = registry.list_models_by_backend(backend) if backend else registry.list_models()

    if not found:
        console.print(f"[yellow]No models registered for backend: {backend}[/yellow]")
        return

    if fmt == "json":
        print_json([model_to_dict(m) for m in found])
    else:
        title = f"{backend} Models" if backend else "Available Models"
        print_models_table(found, title=title)
