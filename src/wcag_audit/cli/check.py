"""CLI command auditing individual files with the built-in criteria."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from wcag_audit.cli.utils import console, print_json, severity_style


def check_cmd(
    files: list[Path] = typer.Argument(..., help="Files to audit"),
    json_output: bool = typer.Option(False, "--json", help="Print findings as JSON"),
) -> None:
    """
    Audit files against the built-in WCAG criteria only.

    External scanners are not run and no report files are written.

    Example:
        wcag-audit check templates/base.html templates/footer.html
    """
    from wcag_audit.core.auditor import DocumentAuditor
    from wcag_audit.core.documents import read_document
    from wcag_audit.utils.errors import DocumentNotFoundError

    auditor = DocumentAuditor()
    results = []
    for file in files:
        try:
            document = read_document(str(file))
        except DocumentNotFoundError as e:
            console.print(f"[yellow]Skipping:[/yellow] {escape(str(e))}")
            continue
        results.append(auditor.audit(document))

    if json_output:
        print_json(
            {
                result.path: [
                    f.model_dump(mode="json", exclude_none=True) for f in result.findings
                ]
                for result in results
            }
        )
        return

    for result in results:
        console.print()
        if result.valid:
            console.print(f"[green]{escape(result.path)}: no issues found[/green]")
            continue

        table = Table(title=escape(result.path))
        table.add_column("Criterion", style="bold")
        table.add_column("Severity")
        table.add_column("Message")
        table.add_column("Recommendation", max_width=40)
        for finding in result.findings:
            style = severity_style(finding.severity.value)
            table.add_row(
                finding.criterion,
                f"[{style}]{finding.severity.value}[/{style}]",
                escape(finding.message),
                escape(finding.recommendation or "-"),
            )
        console.print(table)
