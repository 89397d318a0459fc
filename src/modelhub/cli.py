"""modelhub CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from modelhub import __version__
from modelhub.cli_commands._state import CLIState


@click.group()
@click.version_option(version=__version__, prog_name="modelhub")
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    default=None,
    help="Catalog YAML with extra models and aliases (default: $MODELHUB_CATALOG or ~/.modelhub/models.yaml).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--telemetry", is_flag=True, help="Print OpenTelemetry spans to the console (and export to $OTEL_EXPORTER_OTLP_ENDPOINT when set).")
@click.pass_context
def main(ctx: click.Context, catalog: str | None, verbose: bool, telemetry: bool) -> None:
    """modelhub — browse and resolve LLM models by provider."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if telemetry:
        from modelhub.utils.telemetry import configure_telemetry

        configure_telemetry(export_to_console=True)
    ctx.obj = CLIState(catalog_path=Path(catalog) if catalog else None)


# Register subcommands
from modelhub.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
