"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer
from pydantic import BaseModel
from rich.console import Console

from wcag_audit.utils.errors import WcagAuditError

# Shared console instance
console = Console()


def fail(error: WcagAuditError | Exception, message: str = "Audit failed") -> NoReturn:
    """Print an error and exit with status 1.

    Args:
        error: The error that stopped the command
        message: Leading message
    """
    console.print(f"[red]Error:[/red] {message}")
    console.print(f"  {error}")
    raise typer.Exit(1)


def print_json(data: dict[str, Any] | list[Any] | BaseModel) -> None:
    """Print data as JSON on stdout.

    Args:
        data: Data to output (dict, list or Pydantic model)
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True, exclude_none=True)
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def severity_style(severity: str) -> str:
    """Get the Rich style for a finding severity.

    Args:
        severity: Severity value (CRITICAL, WARNING, LOW)

    Returns:
        Rich style string
    """
    styles = {
        "critical": "bold red",
        "warning": "yellow",
        "low": "blue",
    }
    return styles.get(severity.lower(), "white")
