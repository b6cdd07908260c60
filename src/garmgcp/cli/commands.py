"""Command implementations for CLI."""

import json
from pathlib import Path
from typing import Any, Dict

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from garmgcp.errors import GarmGCPError
from garmgcp.models.extra_specs import EXTRA_SPECS_SCHEMA, parse_extra_specs
from garmgcp.models.params import BootstrapInstance
from garmgcp.models.runner import RunnerSpec
from garmgcp.spec.resolver import SpecResolver


console = Console()


def _read_json(path: Path) -> Any:
    """Read a JSON document from disk."""
    try:
        return json.loads(Path(path).read_text())
    except OSError as e:
        raise GarmGCPError(f"Cannot read {path}: {e}") from e
    except ValueError as e:
        raise GarmGCPError(f"Invalid JSON in {path}: {e}") from e


def load_bootstrap(path: Path) -> BootstrapInstance:
    """Load bootstrap params from a JSON file."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise GarmGCPError(f"Bootstrap params in {path} must be a JSON object")
    try:
        return BootstrapInstance(**data)
    except ValidationError as e:
        raise GarmGCPError(f"Invalid bootstrap params: {e}") from e


def spec_to_dict(spec: RunnerSpec) -> Dict[str, Any]:
    """Summarize a runner spec for display."""
    return {
        "name": spec.bootstrap_params.name,
        "zone": spec.zone,
        "network_id": spec.network_id,
        "subnetwork_id": spec.subnetwork_id,
        "controller_id": spec.controller_id,
        "nic_type": spec.nic_type,
        "disk_size": spec.disk_size,
        "custom_labels": dict(spec.custom_labels),
        "network_tags": spec.network_tags,
        "source_snapshot": spec.source_snapshot,
        "tools": {
            "os": spec.tools.os,
            "architecture": spec.tools.architecture,
            "download_url": spec.tools.download_url,
            "filename": spec.tools.filename,
        },
    }


def show_spec(resolver: SpecResolver, bootstrap_file: Path, controller_id: str, as_json: bool = False):
    """Resolve and print the runner spec."""
    bootstrap = load_bootstrap(bootstrap_file)
    spec = resolver.build(bootstrap, controller_id)
    summary = spec_to_dict(spec)

    if as_json:
        console.out(json.dumps(summary, indent=2), highlight=False)
        return

    table = Table(title=f"Runner spec: {summary['name']}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for field in ("zone", "network_id", "subnetwork_id", "controller_id", "nic_type", "disk_size"):
        table.add_row(field, str(summary[field]))
    table.add_row("source_snapshot", summary["source_snapshot"] or "[dim]-[/dim]")
    table.add_row("network_tags", ", ".join(summary["network_tags"] or []) or "[dim]-[/dim]")
    table.add_row("download", summary["tools"]["download_url"] or "[dim]-[/dim]")
    console.print(table)

    labels = Table(title="Labels")
    labels.add_column("Key", style="cyan")
    labels.add_column("Value", style="magenta")
    for key, value in summary["custom_labels"].items():
        labels.add_row(key, value)
    console.print(labels)


def show_user_data(resolver: SpecResolver, bootstrap_file: Path, controller_id: str):
    """Resolve the runner spec and print its boot script."""
    bootstrap = load_bootstrap(bootstrap_file)
    spec = resolver.build(bootstrap, controller_id)
    script = resolver.render_user_data(spec)
    # Raw bytes, the script may carry a non UTF-8 encoding
    typer.echo(script.encode("utf-8", errors="surrogateescape"), nl=False)


def show_schema():
    """Print the extra specs JSON schema."""
    console.out(json.dumps(EXTRA_SPECS_SCHEMA, indent=2), highlight=False)


def check_extra_specs(extra_specs_file: Path):
    """Validate an extra specs payload file."""
    try:
        raw = Path(extra_specs_file).read_bytes()
    except OSError as e:
        raise GarmGCPError(f"Cannot read {extra_specs_file}: {e}") from e

    parse_extra_specs(raw)
    console.print(f"[green]✓[/green] {extra_specs_file} is valid")
