"""``modelhub providers`` — providers, their setup state, and their models."""

from __future__ import annotations

import click

from modelhub.cli_commands._output import print_json, print_providers, providers_to_dict
from modelhub.cli_commands._state import CLIState


@click.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.pass_obj
def providers(state: CLIState, fmt: str) -> None:
    """List providers and the models reachable through each."""
    registry = state.registry()
    if fmt == "json":
        print_json(providers_to_dict(registry))
    else:
        print_providers(registry)
