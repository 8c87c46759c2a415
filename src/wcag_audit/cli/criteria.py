"""CLI command listing the built-in criteria."""

from typing import Optional

import typer
from rich.table import Table

from wcag_audit.cli.utils import console, print_json


def criteria_cmd(
    level: Optional[str] = typer.Option(None, "--level", "-l", help="Only show this level (A, AA)"),
    json_output: bool = typer.Option(False, "--json", help="Print the catalog as JSON"),
) -> None:
    """
    List the WCAG criteria evaluated by the auditor.
    """
    from wcag_audit.core.registry import get_default_registry
    from wcag_audit.models.criterion import ConformanceLevel

    registry = get_default_registry()
    criteria = registry.all()
    if level:
        try:
            wanted = ConformanceLevel(level.upper())
        except ValueError:
            console.print(f"[red]Error:[/red] Invalid level: {level}")
            raise typer.Exit(1)
        criteria = tuple(c for c in criteria if c.level == wanted)

    if json_output:
        print_json([c.model_dump(mode="json") for c in criteria])
        return

    table = Table(title="WCAG 2.1 Criteria")
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Level")
    table.add_column("Description", max_width=60)
    for c in criteria:
        table.add_row(c.id, c.name, c.level.value, c.description)
    console.print(table)
