"""Terminal renderer for wcag-audit output."""

from __future__ import annotations

import io

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wcag_audit.core.scorer import format_compliance
from wcag_audit.models.criterion import ConformanceLevel
from wcag_audit.models.report import WCAG_RESULT_KEY, AuditReport
from wcag_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext

SEVERITY_STYLES = {
    "CRITICAL": "bold red",
    "WARNING": "yellow",
    "LOW": "blue",
}


class TerminalRenderer(BaseRenderer):
    """Renders a rich summary to the terminal.

    ``render`` prints and returns an empty string; ``render_to_file``
    records the console output instead.

    Example:
        renderer = TerminalRenderer()
        renderer.render(report, RenderContext(verbose=True))
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the terminal renderer.

        Args:
            console: Rich console to use. Creates a new one if None.
        """
        self._console = console or Console()

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.TERMINAL

    def render(self, report: AuditReport, context: RenderContext) -> str:
        """Print the report summary (and, when verbose, every finding)."""
        summary = report.summary
        self._console.print()
        self._console.print(
            Panel(
                f"[bold]Generated:[/bold] {report.timestamp.isoformat()}\n"
                f"[bold]Tools:[/bold] {', '.join(report.tools)}",
                title="Accessibility Report",
            )
        )

        table = Table(title="Summary", show_header=False)
        table.add_column("Metric", style="bold")
        table.add_column("Count")
        table.add_row("Files Tested", str(summary.documents_processed))
        table.add_row("Total Issues", str(summary.total_issues))
        table.add_row("Critical", f"[red]{summary.critical_issues}[/red]")
        table.add_row("Warnings", f"[yellow]{summary.warnings}[/yellow]")
        table.add_row("Low", f"[blue]{summary.low_issues}[/blue]")
        self._console.print(table)

        table = Table(title="WCAG 2.1 Compliance")
        table.add_column("Level", style="bold")
        table.add_column("Compliance")
        table.add_column("Passed")
        table.add_column("Total")
        for level in ConformanceLevel:
            tally = summary.tally(level)
            table.add_row(
                level.value,
                format_compliance(report.compliance.get(level)),
                str(tally.passed),
                str(tally.total),
            )
        self._console.print(table)

        table = Table(title="Files")
        table.add_column("File")
        table.add_column("Issues", justify="right")
        for path, file_report in report.files.items():
            style = "green" if file_report.total_issues == 0 else "red"
            table.add_row(escape(path), f"[{style}]{file_report.total_issues}[/{style}]")
        self._console.print(table)

        if context.verbose:
            self._render_findings(report)

        return ""

    def _render_findings(self, report: AuditReport) -> None:
        for path, file_report in report.files.items():
            rows = [
                (key, section.tool, issue)
                for key, section in file_report.sections.items()
                for issue in section.issues
            ]
            if not rows:
                continue

            table = Table(title=escape(path))
            table.add_column("Severity")
            table.add_column("Source", style="bold")
            table.add_column("Message")
            table.add_column("Recommendation", max_width=40)
            for key, tool, issue in rows:
                severity = str(issue.get("severity", ""))
                style = SEVERITY_STYLES.get(severity, "white")
                source = issue.get("criterion", "") if key == WCAG_RESULT_KEY else tool
                table.add_row(
                    f"[{style}]{severity}[/{style}]",
                    escape(str(source)),
                    escape(str(issue.get("message", ""))),
                    escape(str(issue.get("recommendation") or "-")),
                )
            self._console.print(table)

    def render_to_file(self, report: AuditReport, context: RenderContext) -> None:
        """Record the terminal output as plain text in a file."""
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        file_console = Console(record=True, file=io.StringIO(), width=120)
        original_console = self._console
        self._console = file_console
        try:
            self.render(report, context)
            context.output_path.parent.mkdir(parents=True, exist_ok=True)
            context.output_path.write_text(file_console.export_text(), encoding="utf-8")
        finally:
            self._console = original_console
