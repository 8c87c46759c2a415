"""CLI command running the full audit pipeline."""

from pathlib import Path
from typing import Optional

import typer

from wcag_audit.cli.utils import console, fail
from wcag_audit.utils.errors import WcagAuditError


def run_cmd(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a wcag-audit YAML config file",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory the reports are written to",
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-b",
        help="Directory the configured file lists are relative to",
    ),
    no_scanners: bool = typer.Option(
        False,
        "--no-scanners",
        help="Skip the external axe-core and pa11y scanners",
    ),
    include_assets: bool = typer.Option(
        False,
        "--include-assets",
        help="Also audit the configured CSS and JS files",
    ),
    formats: Optional[list[str]] = typer.Option(
        None,
        "--format",
        "-f",
        help="Artifact to write (json, html, markdown); repeatable",
    ),
    verbose: bool = typer.Option(
        False,
        "--details",
        help="Print every finding in the terminal summary",
    ),
) -> None:
    """
    Run the full accessibility audit.

    Audits the configured templates against the built-in WCAG 2.1 A/AA
    criteria, runs axe-core and pa11y where available, and writes a JSON
    snapshot plus an HTML report.

    Example:
        wcag-audit run --output-dir ./a11y-results
    """
    execute_run(
        config_file=config_file,
        output_dir=output_dir,
        base_dir=base_dir,
        no_scanners=no_scanners,
        include_assets=include_assets,
        formats=formats,
        verbose=verbose,
    )


def execute_run(
    config_file: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    base_dir: Optional[Path] = None,
    no_scanners: bool = False,
    include_assets: bool = False,
    formats: Optional[list[str]] = None,
    verbose: bool = False,
) -> None:
    """Run the pipeline with configuration overrides applied."""
    from wcag_audit.core.documents import load_documents
    from wcag_audit.core.runner import AuditRunner
    from wcag_audit.renderers import RenderContext, TerminalRenderer, write_reports
    from wcag_audit.utils.config import get_config, load_config

    try:
        config = load_config(config_file) if config_file else get_config()
    except (FileNotFoundError, ValueError) as e:
        fail(e, "Could not load configuration")

    targets = config.targets.model_copy(
        update={
            "base_dir": str(base_dir) if base_dir else config.targets.base_dir,
            "include_assets": include_assets or config.targets.include_assets,
        }
    )
    output = config.output.model_copy(
        update={
            "directory": str(output_dir) if output_dir else config.output.directory,
            "formats": formats or config.output.formats,
        }
    )
    scanners = config.scanners
    if no_scanners:
        scanners = scanners.model_copy(
            update={
                "axe": scanners.axe.model_copy(update={"enabled": False}),
                "pa11y": scanners.pa11y.model_copy(update={"enabled": False}),
            }
        )

    try:
        runner = AuditRunner.from_config(scanners)
        documents = load_documents(targets.paths(), targets.base_dir)
        with console.status("Auditing documents..."):
            report = runner.run(documents)
        written = write_reports(report, output)
    except WcagAuditError as e:
        fail(e)
    except ValueError as e:
        fail(e, "Invalid output configuration")

    TerminalRenderer(console).render(report, RenderContext(verbose=verbose))

    console.print()
    for path in written:
        console.print(f"Report written to {path}")
