"""Markdown narrative renderer."""

from __future__ import annotations

from wcag_audit.core.scorer import format_compliance
from wcag_audit.models.criterion import ConformanceLevel
from wcag_audit.models.report import WCAG_RESULT_KEY, AuditReport
from wcag_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext


class MarkdownRenderer(BaseRenderer):
    """Renders the run as a Markdown document.

    Example:
        renderer = MarkdownRenderer()
        md_str = renderer.render(report, context)
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.MARKDOWN

    def render(self, report: AuditReport, context: RenderContext) -> str:
        """Render the report to Markdown."""
        summary = report.summary
        lines = [
            f"# {context.title}",
            "",
            f"**Generated:** {report.timestamp.isoformat()}",
            "",
            f"**Testing Tools:** {', '.join(report.tools)}",
            "",
            "## Summary",
            "",
            f"- Total Issues: **{summary.total_issues}**",
            f"- Critical Issues: {summary.critical_issues}",
            f"- Warnings: {summary.warnings}",
            f"- Low: {summary.low_issues}",
            f"- Files Tested: {summary.documents_processed}",
            "",
            "## WCAG 2.1 Compliance",
            "",
            "| Level | Compliance | Passed | Failed | Total |",
            "|-------|------------|--------|--------|-------|",
        ]
        for level in ConformanceLevel:
            tally = summary.tally(level)
            lines.append(
                f"| {level.value} | {format_compliance(report.compliance.get(level))} | "
                f"{tally.passed} | {tally.failed} | {tally.total} |"
            )
        lines.append("")

        for path, file_report in report.files.items():
            lines.extend([f"## `{path}`", "", f"Total Issues: **{file_report.total_issues}**", ""])
            rows = []
            for key, section in file_report.sections.items():
                for issue in section.issues:
                    source = issue.get("criterion", "") if key == WCAG_RESULT_KEY else section.tool
                    rows.append(
                        f"| {issue.get('severity', '')} | {self._escape_md(str(source))} | "
                        f"{self._escape_md(str(issue.get('message', '')))} | "
                        f"{self._escape_md(str(issue.get('recommendation') or '-'))} |"
                    )
            if rows:
                lines.extend(
                    [
                        "| Severity | Source | Message | Recommendation |",
                        "|----------|--------|---------|----------------|",
                        *rows,
                        "",
                    ]
                )
            else:
                lines.extend(["No accessibility issues found.", ""])

        if context.verbose and report.criteria:
            lines.extend(["## Criteria Details", ""])
            for c in report.criteria:
                lines.append(f"- **{c.id} {c.name}** (Level {c.level.value}): {c.description}")
            lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _escape_md(text: str) -> str:
        """Escape special Markdown characters."""
        if not text:
            return text
        return text.replace("|", "\\|").replace("\n", " ")
