"""``modelhub ollama`` — models installed on a local Ollama server."""

from __future__ import annotations

import asyncio
import sys

import click

from modelhub.cli_commands._output import console, model_to_dict, print_json, print_models_table
from modelhub.cli_commands._state import CLIState
from modelhub.core.catalog.models import ModelConfig  # noqa: TC001


@click.group()
def ollama() -> None:
    """Inspect a local Ollama server."""


@ollama.command("discover")
@click.option(
    "--host",
    default=None,
    envvar="OLLAMA_HOST",
    help="Ollama server URL or host:port (default: $OLLAMA_HOST or http://localhost:11434).",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
def discover(state: CLIState, host: str | None, as_json: bool) -> None:
    """List models installed on the Ollama server.

    Discovered models are registered under the ``ollama`` provider, so the
    listing shows how each one resolves.
    """
    from modelhub.core.discovery.errors import DiscoveryError
    from modelhub.core.discovery.ollama import DEFAULT_BASE_URL, OllamaDiscovery, register_discovered

    async def _discover() -> list[ModelConfig]:
        async with OllamaDiscovery(host or DEFAULT_BASE_URL) as discovery:
            return await discovery.list_models()

    try:
        found = asyncio.run(_discover())
    except DiscoveryError as exc:
        console.print(f"[red]Discovery error:[/red] {exc}")
        sys.exit(1)

    if not found:
        console.print("[yellow]No models installed on the Ollama server.[/yellow]")
        return

    registry = state.registry()
    register_discovered(registry, found)

    if as_json:
        print_json([model_to_dict(m) for m in found])
        return

    print_models_table(found, title="Ollama Models")
    for model in found:
        console.print(f"  ollama/{model.id}")
