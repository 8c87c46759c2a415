"""HTML narrative report renderer."""

from __future__ import annotations

from html import escape
from typing import Any

from wcag_audit.core.scorer import format_compliance
from wcag_audit.models.criterion import ConformanceLevel
from wcag_audit.models.report import WCAG_RESULT_KEY, AuditReport, FileReport
from wcag_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext

STYLE = """
        body { font-family: Arial, sans-serif; margin: 20px; line-height: 1.6; }
        .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 30px; border-radius: 10px; text-align: center; }
        .summary { background: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0; border-left: 5px solid #28a745; }
        .compliance { display: grid; grid-template-columns: 1fr 1fr; gap: 20px; margin: 20px 0; }
        .compliance-card { background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); text-align: center; }
        .compliance-a { border-top: 4px solid #007bff; }
        .compliance-aa { border-top: 4px solid #28a745; }
        .file-section { margin: 25px 0; border: 1px solid #dee2e6; border-radius: 8px; overflow: hidden; }
        .file-header { background: #e9ecef; padding: 15px; border-bottom: 1px solid #dee2e6; }
        .file-header h3 { margin: 0; color: #495057; }
        .issue { margin: 15px; padding: 15px; border-left: 4px solid #dc3545; background: #f8d7da; border-radius: 4px; }
        .issue.warning { border-left-color: #ffc107; background: #fff3cd; }
        .issue.low { border-left-color: #17a2b8; background: #d1ecf1; }
        .issue.critical { border-left-color: #dc3545; background: #f8d7da; }
        .criterion { font-weight: bold; color: #007bff; background: #e7f3ff; padding: 2px 6px; border-radius: 3px; }
        .timestamp { font-size: 0.9em; }
        .tool-badge { display: inline-block; background: #6f42c1; color: white; padding: 2px 8px; border-radius: 12px; font-size: 0.8em; margin-right: 8px; }
        .severity-badge { display: inline-block; padding: 2px 8px; border-radius: 12px; font-size: 0.8em; margin-left: 8px; }
        .severity-critical { background: #dc3545; color: white; }
        .severity-warning { background: #ffc107; color: #212529; }
        .severity-low { background: #17a2b8; color: white; }
        .stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 15px; margin: 20px 0; }
        .stat-card { background: white; padding: 15px; border-radius: 6px; box-shadow: 0 1px 3px rgba(0,0,0,0.1); text-align: center; }
        .stat-number { font-size: 2em; font-weight: bold; color: #007bff; }
        .stat-label { color: #6c757d; font-size: 0.9em; }
        .clean { padding: 20px; color: #28a745; font-weight: bold; }
        .criteria-details { padding: 20px; }
        .criterion-detail { margin: 15px 0; padding: 15px; background: #f8f9fa; border-radius: 6px; }
"""

SECTION_HEADINGS = {
    "accessibilityTest": "Axe-core Accessibility Issues",
    "pa11yTest": "Pa11y Accessibility Issues",
    WCAG_RESULT_KEY: "WCAG Compliance Issues",
}


def _e(value: Any) -> str:
    return escape(str(value), quote=True)


class HTMLRenderer(BaseRenderer):
    """Renders a standalone HTML narrative of the run.

    All interpolated values are escaped; element excerpts are shown as code.

    Example:
        renderer = HTMLRenderer()
        renderer.render_to_file(report, RenderContext(output_path=Path("report.html")))
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.HTML

    def render(self, report: AuditReport, context: RenderContext) -> str:
        """Render the report to an HTML document."""
        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '    <meta charset="UTF-8">',
            '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"    <title>{_e(context.title)}</title>",
            f"    <style>{STYLE}    </style>",
            "</head>",
            "<body>",
            self._header(report, context),
            self._summary(report),
            self._compliance(report),
        ]
        for path, file_report in report.files.items():
            parts.append(self._file_section(report, path, file_report))
        parts.append(self._criteria_details(report))
        parts.extend(["</body>", "</html>", ""])
        return "\n".join(parts)

    def _header(self, report: AuditReport, context: RenderContext) -> str:
        return (
            '    <div class="header">\n'
            f"        <h1>{_e(context.title)}</h1>\n"
            f'        <p class="timestamp">Generated: {_e(report.timestamp.isoformat())}</p>\n'
            f"        <p><strong>Testing Tools:</strong> {_e(', '.join(report.tools))}</p>\n"
            "    </div>"
        )

    def _summary(self, report: AuditReport) -> str:
        summary = report.summary
        cards = [
            (summary.total_issues, "Total Issues"),
            (summary.critical_issues, "Critical Issues"),
            (summary.warnings, "Warnings"),
            (summary.documents_processed, "Files Tested"),
        ]
        body = "\n".join(
            '            <div class="stat-card">'
            f'<div class="stat-number">{number}</div>'
            f'<div class="stat-label">{label}</div></div>'
            for number, label in cards
        )
        return (
            '    <div class="summary">\n'
            "        <h2>Executive Summary</h2>\n"
            '        <div class="stats">\n'
            f"{body}\n"
            "        </div>\n"
            "    </div>"
        )

    def _compliance(self, report: AuditReport) -> str:
        cards = []
        for level, css in ((ConformanceLevel.A, "compliance-a"), (ConformanceLevel.AA, "compliance-aa")):
            tally = report.summary.tally(level)
            value = format_compliance(report.compliance.get(level))
            cards.append(
                f'        <div class="compliance-card {css}">\n'
                f"            <h3>WCAG 2.1 Level {level.value}</h3>\n"
                f'            <div class="stat-number">{value}</div>\n'
                f"            <p>{tally.passed}/{tally.total} criteria passed</p>\n"
                "        </div>"
            )
        return '    <div class="compliance">\n' + "\n".join(cards) + "\n    </div>"

    def _file_section(self, report: AuditReport, path: str, file_report: FileReport) -> str:
        issues_html = []
        for key, section in file_report.sections.items():
            if not section.issues:
                continue
            heading = SECTION_HEADINGS.get(key, f"{section.tool} Issues")
            issues_html.append(f"            <h4>{_e(heading)}</h4>")
            for issue in section.issues:
                if key == WCAG_RESULT_KEY:
                    issues_html.append(self._wcag_issue(report, issue))
                else:
                    issues_html.append(self._tool_issue(section.tool, issue))

        if not issues_html:
            issues_html.append('            <p class="clean">No accessibility issues found</p>')

        return (
            '    <div class="file-section">\n'
            '        <div class="file-header">\n'
            f"            <h3>{_e(path)}</h3>\n"
            f"            <p><strong>Total Issues:</strong> {file_report.total_issues}</p>\n"
            "        </div>\n" + "\n".join(issues_html) + "\n    </div>"
        )

    @staticmethod
    def _badge(severity: str) -> str:
        css = severity.lower()
        return f'<span class="severity-badge severity-{_e(css)}">{_e(severity)}</span>'

    def _tool_issue(self, tool: str, issue: dict[str, Any]) -> str:
        severity = str(issue.get("severity", "CRITICAL"))
        lines = [
            f'            <div class="issue {_e(severity.lower())}">',
            f'                <span class="tool-badge">{_e(tool)}</span>',
            f"                <strong>{_e(issue.get('message', ''))}</strong>",
            f"                {self._badge(severity)}",
        ]
        details = (
            ("help", "Help"),
            ("tags", "Tags"),
            ("nodes", "Affected Elements"),
            ("code", "Code"),
            ("selector", "Selector"),
            ("context", "Context"),
        )
        for key, label in details:
            if key not in issue:
                continue
            value = issue[key]
            if isinstance(value, list):
                value = ", ".join(str(v) for v in value)
            lines.append(f"                <br><strong>{label}:</strong> {_e(value)}")
        lines.append("            </div>")
        return "\n".join(lines)

    def _wcag_issue(self, report: AuditReport, issue: dict[str, Any]) -> str:
        criterion_id = str(issue.get("criterion", ""))
        info = report.criterion(criterion_id)
        name = info.name if info else ""
        severity = str(issue.get("severity", "WARNING"))
        lines = [
            f'            <div class="issue {_e(severity.lower())}">',
            '                <span class="tool-badge">WCAG</span>',
            f"                <strong>{_e(criterion_id)}:</strong> {_e(issue.get('message', ''))}",
            f"                {self._badge(severity)}",
            f'                <br><span class="criterion">{_e(criterion_id)} - {_e(name)}</span>',
        ]
        if issue.get("recommendation"):
            lines.append(
                f"                <br><strong>Recommendation:</strong> {_e(issue['recommendation'])}"
            )
        if issue.get("element"):
            lines.append(f"                <br><strong>Element:</strong> <code>{_e(issue['element'])}</code>")
        lines.append("            </div>")
        return "\n".join(lines)

    def _criteria_details(self, report: AuditReport) -> str:
        entries = "\n".join(
            '            <div class="criterion-detail">\n'
            f'                <h4><span class="criterion">{_e(c.id)}</span> {_e(c.name)} (Level {c.level.value})</h4>\n'
            f"                <p><strong>Description:</strong> {_e(c.description)}</p>\n"
            "            </div>"
            for c in report.criteria
        )
        return (
            '    <div class="file-section">\n'
            '        <div class="file-header"><h3>WCAG 2.1 AA Criteria Details</h3></div>\n'
            f'        <div class="criteria-details">\n{entries}\n        </div>\n'
            "    </div>"
        )
