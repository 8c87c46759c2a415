"""JSON snapshot renderer."""

from __future__ import annotations

import json

from wcag_audit.models.report import AuditReport
from wcag_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext


class JSONRenderer(BaseRenderer):
    """Renders the machine-readable snapshot.

    Shape: ``{timestamp, tools, files: {path: {<tool sections>, totalIssues}},
    summary: {totalIssues, criticalIssues, warnings, passedTests,
    wcagCompliance: {levelA, levelAA}}}``.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(report, RenderContext(format=OutputFormat.JSON))
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.JSON

    def render(self, report: AuditReport, context: RenderContext) -> str:
        """Render the report snapshot as JSON."""
        return json.dumps(
            report.to_snapshot(),
            indent=context.indent if context.indent else None,
            ensure_ascii=False,
        )
