"""Report snapshot models consumed by renderers."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_serializer

from wcag_audit.models.audit import AuditResult, RunSummary
from wcag_audit.models.criterion import ConformanceLevel
from wcag_audit.models.scanner import ScannerResult

WCAG_RESULT_KEY = "wcagCheck"
WCAG_TOOL_NAME = "WCAG 2.1 AA Analysis"


class FileAudit(BaseModel):
    """Everything gathered for one document during a run."""

    model_config = {"frozen": True}

    path: str
    wcag: AuditResult
    scanner_results: list[ScannerResult] = Field(default_factory=list)

    @property
    def total_issues(self) -> int:
        """Issues from every source for this document."""
        return len(self.wcag.findings) + sum(len(r.findings) for r in self.scanner_results)


class ToolSection(BaseModel):
    """One tool's findings for one file, as stored in the snapshot."""

    model_config = {"frozen": True}

    tool: str = Field(exclude=True)
    valid: bool
    issues: list[dict[str, Any]] = Field(default_factory=list)


class FileReport(BaseModel):
    """Per-file entry of the snapshot.

    Serializes flat: one key per tool section plus ``totalIssues``.
    """

    model_config = {"frozen": True}

    sections: dict[str, ToolSection] = Field(default_factory=dict)
    total_issues: int = 0

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            key: section.model_dump(mode="json") for key, section in self.sections.items()
        }
        data["totalIssues"] = self.total_issues
        return data


class CriterionInfo(BaseModel):
    """Descriptive metadata for one criterion."""

    model_config = {"frozen": True}

    id: str
    name: str
    level: ConformanceLevel
    description: str = ""


class AuditReport(BaseModel):
    """Serializable snapshot of a completed (or partially completed) run."""

    model_config = {"frozen": True}

    timestamp: datetime
    tools: list[str] = Field(default_factory=list)
    files: dict[str, FileReport] = Field(default_factory=dict)
    summary: RunSummary = Field(default_factory=RunSummary)
    compliance: dict[ConformanceLevel, float | None] = Field(default_factory=dict, exclude=True)
    criteria: list[CriterionInfo] = Field(default_factory=list, exclude=True)

    def criterion(self, criterion_id: str) -> CriterionInfo | None:
        """Look up criterion metadata by identifier."""
        for info in self.criteria:
            if info.id == criterion_id:
                return info
        return None

    def to_snapshot(self) -> dict[str, Any]:
        """Dump to the JSON snapshot shape."""
        return self.model_dump(mode="json", by_alias=True)
