"""wcag-audit: static WCAG 2.1 A/AA accessibility auditing.

This package audits HTML templates (and optionally CSS/JS assets) against a
catalog of pattern-based WCAG 2.1 checks, merges in findings from external
scanners, and produces a JSON snapshot and an HTML report:

- **Criterion Registry**: ordered catalog of criteria and their rules
- **Document Auditor**: evaluates every criterion against one document
- **Aggregate Scorer**: folds per-document outcomes into run-wide totals
- **Report Assembler**: projects the run into a serializable snapshot

Usage:
    # Library API
    from wcag_audit import AuditRunner, Document, DocumentAuditor

    auditor = DocumentAuditor()
    result = auditor.audit(Document(path="index.html", content=html))
    for finding in result.findings:
        print(finding.criterion, finding.severity, finding.message)

    # Full run with external scanners
    runner = AuditRunner(scanners=[AxeScanner(), Pa11yScanner()])
    report = runner.run(load_documents(["templates/base.html"]))

CLI:
    wcag-audit
    wcag-audit run --output-dir <dir>
    wcag-audit check <file>...
    wcag-audit criteria
"""

__version__ = "0.1.0"

# Core classes
from wcag_audit.core.registry import CriterionRegistry, get_default_registry
from wcag_audit.core.auditor import DocumentAuditor
from wcag_audit.core.scorer import compliance, fold
from wcag_audit.core.assembler import ReportAssembler
from wcag_audit.core.documents import load_documents
from wcag_audit.core.runner import AuditRunner

# Models (commonly used)
from wcag_audit.models.criterion import ConformanceLevel, Criterion, Finding, Severity
from wcag_audit.models.document import Document
from wcag_audit.models.audit import AuditResult, LevelTally, RunSummary
from wcag_audit.models.report import AuditReport

# Scanners
from wcag_audit.scanners import AxeScanner, Pa11yScanner, Scanner

# Renderers
from wcag_audit.renderers.base import Renderer, RenderContext, OutputFormat

__all__ = [
    # Version
    "__version__",
    # Core
    "CriterionRegistry",
    "get_default_registry",
    "DocumentAuditor",
    "compliance",
    "fold",
    "ReportAssembler",
    "load_documents",
    "AuditRunner",
    # Models
    "ConformanceLevel",
    "Criterion",
    "Finding",
    "Severity",
    "Document",
    "AuditResult",
    "LevelTally",
    "RunSummary",
    "AuditReport",
    # Scanners
    "AxeScanner",
    "Pa11yScanner",
    "Scanner",
    # Renderers
    "Renderer",
    "RenderContext",
    "OutputFormat",
]
