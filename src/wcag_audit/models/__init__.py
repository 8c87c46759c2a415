"""Data models for wcag-audit.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from wcag_audit.models.criterion import ConformanceLevel, Criterion, Finding, Severity
from wcag_audit.models.document import Document, DocumentKind
from wcag_audit.models.audit import AuditResult, LevelTally, RunSummary
from wcag_audit.models.scanner import AuditError, ScannerResult, ToolFinding
from wcag_audit.models.report import (
    WCAG_RESULT_KEY,
    WCAG_TOOL_NAME,
    AuditReport,
    CriterionInfo,
    FileAudit,
    FileReport,
    ToolSection,
)

__all__ = [
    # Criteria
    "ConformanceLevel",
    "Criterion",
    "Finding",
    "Severity",
    # Documents
    "Document",
    "DocumentKind",
    # Audit
    "AuditResult",
    "LevelTally",
    "RunSummary",
    # Scanners
    "AuditError",
    "ScannerResult",
    "ToolFinding",
    # Report
    "WCAG_RESULT_KEY",
    "WCAG_TOOL_NAME",
    "AuditReport",
    "CriterionInfo",
    "FileAudit",
    "FileReport",
    "ToolSection",
]
