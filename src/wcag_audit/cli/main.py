"""Main CLI entry point for wcag-audit."""

import typer
from rich.console import Console

from wcag_audit.cli import check, criteria, run

app = typer.Typer(
    name="wcag-audit",
    help="Static WCAG 2.1 A/AA accessibility audit for HTML templates.",
    invoke_without_command=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="run")(run.run_cmd)
app.command(name="check")(check.check_cmd)
app.command(name="criteria")(criteria.criteria_cmd)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output"),
    structured_logs: bool = typer.Option(
        False,
        "--structured-logs",
        help="Plain key=value log lines for CI instead of rich output",
    ),
) -> None:
    """
    wcag-audit: static WCAG 2.1 accessibility auditing.

    Run without a command to audit the configured templates and write the
    JSON and HTML reports.

    - [bold]run[/bold]: Run the full audit with options
    - [bold]check[/bold]: Audit individual files with the built-in criteria
    - [bold]criteria[/bold]: List the built-in criteria
    """
    from wcag_audit.utils.logging import configure_logging

    level = "DEBUG" if verbose else "WARNING" if quiet else "INFO"
    configure_logging(level=level, structured=structured_logs)

    if ctx.invoked_subcommand is None:
        run.execute_run()


@app.command()
def version() -> None:
    """Show the wcag-audit version."""
    from wcag_audit import __version__

    console.print(f"wcag-audit version {__version__}")


if __name__ == "__main__":
    app()
