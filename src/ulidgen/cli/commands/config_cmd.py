"""``ulidgen config``: show the resolved configuration."""

from __future__ import annotations

import typer
from rich.table import Table

from ulidgen.cli.ui import console
from ulidgen.config import load_config


def config(
    show_path: bool = typer.Option(
        False,
        "--path",
        help="Only print the location of the config file",
    ),
) -> None:
    """Display configured defaults and where each one comes from."""
    resolved = load_config()

    if show_path:
        print(resolved.path)
        return

    table = Table(title="ulidgen configuration", show_lines=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="bold")
    table.add_column("Source", style="dim")

    for name, value in resolved.to_dict().items():
        source = resolved.sources.get(name, "default")
        table.add_row(name, str(value).lower() if isinstance(value, bool) else str(value), source)

    console.print(table)
