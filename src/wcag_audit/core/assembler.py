"""Report assembler: projects run state into a serializable snapshot."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from wcag_audit.core.registry import CriterionRegistry
from wcag_audit.core.scorer import compliance
from wcag_audit.models.audit import RunSummary
from wcag_audit.models.criterion import ConformanceLevel
from wcag_audit.models.report import (
    WCAG_RESULT_KEY,
    WCAG_TOOL_NAME,
    AuditReport,
    CriterionInfo,
    FileAudit,
    FileReport,
    ToolSection,
)


class ReportAssembler:
    """Builds an AuditReport from the final summary and per-file audits.

    No evaluation happens here. Third-party findings are merged as opaque
    sections next to the built-in analysis, keyed by each tool's result key.

    Example:
        assembler = ReportAssembler(registry, tools=["axe-core", "pa11y"])
        report = assembler.assemble(summary, file_audits)
    """

    def __init__(self, registry: CriterionRegistry, tools: Sequence[str] = ()) -> None:
        """Initialize the assembler.

        Args:
            registry: Registry used for criterion metadata lookup
            tools: Names of external tools that took part in the run
        """
        self._registry = registry
        self._tools = [*tools, WCAG_TOOL_NAME]

    def assemble(
        self,
        summary: RunSummary,
        audits: Sequence[FileAudit],
        timestamp: datetime | None = None,
    ) -> AuditReport:
        """Assemble the report snapshot.

        Args:
            summary: Final run summary
            audits: Per-file audits in processing order
            timestamp: Report timestamp (defaults to now, UTC)

        Returns:
            AuditReport ready for rendering
        """
        files = {audit.path: self._file_report(audit) for audit in audits}

        return AuditReport(
            timestamp=timestamp or datetime.now(timezone.utc),
            tools=list(self._tools),
            files=files,
            summary=summary,
            compliance={
                level: compliance(summary, level) for level in ConformanceLevel
            },
            criteria=[
                CriterionInfo(
                    id=c.id,
                    name=c.name,
                    level=c.level,
                    description=c.description,
                )
                for c in self._registry.all()
            ],
        )

    @staticmethod
    def _file_report(audit: FileAudit) -> FileReport:
        sections: dict[str, ToolSection] = {}
        for scanned in audit.scanner_results:
            sections[scanned.result_key] = ToolSection(
                tool=scanned.tool,
                valid=scanned.valid,
                issues=scanned.issues(),
            )
        sections[WCAG_RESULT_KEY] = ToolSection(
            tool=WCAG_TOOL_NAME,
            valid=audit.wcag.valid,
            issues=[
                f.model_dump(mode="json", exclude_none=True) for f in audit.wcag.findings
            ],
        )
        return FileReport(sections=sections, total_issues=audit.total_issues)
