"""Main CLI implementation using Typer."""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console

from garmgcp.cli.commands import (
    check_extra_specs,
    show_schema,
    show_spec,
    show_user_data,
)
from garmgcp.config import ConfigManager
from garmgcp.errors import GarmGCPError
from garmgcp.spec.resolver import SpecResolver
from garmgcp.utils.logging import setup_logging


logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="garmgcp",
    help="Resolve GARM runner specs and user data for Google Compute Engine",
    add_completion=False,
)

# Errors go to stderr, stdout carries specs and scripts
console = Console(stderr=True)


def _run_cli_command(handler: Callable[..., Any], **kwargs: Any):
    """Helper to run a CLI command with error handling."""
    try:
        handler(**kwargs)
    except GarmGCPError as e:
        logger.debug(f"Command failed: {e}", exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _resolver(config: Optional[Path]) -> SpecResolver:
    """Load operator config, setup logging and build a resolver."""
    provider_config = ConfigManager(config).load()
    setup_logging(provider_config.logging.log_level)
    return SpecResolver(provider_config)


def _run_resolver_command(handler: Callable[..., Any], config: Optional[Path], **kwargs: Any):
    """Run a command that needs the operator config."""
    def run(**inner: Any):
        handler(_resolver(config), **inner)

    _run_cli_command(run, **kwargs)


@app.command("spec")
def spec_command(
    bootstrap_file: Path = typer.Argument(..., help="Bootstrap params JSON file"),
    controller_id: str = typer.Option(..., "--controller-id", "-c", help="GARM controller ID"),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Provider config file (default: $GARM_GCP_CONFIG)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the spec as JSON"),
):
    """Resolve and show the runner spec."""
    _run_resolver_command(
        show_spec,
        config,
        bootstrap_file=bootstrap_file,
        controller_id=controller_id,
        as_json=as_json,
    )


@app.command("userdata")
def userdata_command(
    bootstrap_file: Path = typer.Argument(..., help="Bootstrap params JSON file"),
    controller_id: str = typer.Option(..., "--controller-id", "-c", help="GARM controller ID"),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Provider config file (default: $GARM_GCP_CONFIG)"
    ),
):
    """Render the runner boot script."""
    _run_resolver_command(
        show_user_data,
        config,
        bootstrap_file=bootstrap_file,
        controller_id=controller_id,
    )


@app.command("schema")
def schema_command():
    """Print the extra specs JSON schema."""
    show_schema()


@app.command("validate-extra-specs")
def validate_extra_specs_command(
    extra_specs_file: Path = typer.Argument(..., help="Extra specs JSON file"),
):
    """Validate an extra specs payload."""
    _run_cli_command(check_extra_specs, extra_specs_file=extra_specs_file)


def main():
    """Main entry point for CLI."""
    app()
