"""Audit runner: drives documents through scanners, auditor and scorer."""

from __future__ import annotations

import time
from typing import Sequence

from wcag_audit.core.assembler import ReportAssembler
from wcag_audit.core.auditor import DocumentAuditor
from wcag_audit.core.registry import CriterionRegistry, get_default_registry
from wcag_audit.core.scorer import fold
from wcag_audit.models.audit import RunSummary
from wcag_audit.models.document import Document, DocumentKind
from wcag_audit.models.report import AuditReport, FileAudit
from wcag_audit.models.scanner import ScannerResult
from wcag_audit.scanners.base import Scanner
from wcag_audit.utils.config import ScannersConfig
from wcag_audit.utils.logging import get_logger, get_logger_with_context

logger = get_logger("runner")


class AuditRunner:
    """Runs a full accessibility audit over an ordered list of documents.

    Documents are processed one at a time in the order given. External
    scanners only see HTML documents. The summary only ever grows, so the
    report is valid even when a time budget cuts the run short.

    Example:
        runner = AuditRunner(scanners=[AxeScanner(), Pa11yScanner()])
        report = runner.run(load_documents(paths))
        print(report.summary.total_issues)
    """

    def __init__(
        self,
        registry: CriterionRegistry | None = None,
        scanners: Sequence[Scanner] = (),
        time_budget: float | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Criteria to evaluate. Defaults to the built-in catalog.
            scanners: External scanners to run per HTML document
            time_budget: Seconds after which no further documents are started
        """
        self._registry = registry if registry is not None else get_default_registry()
        self._auditor = DocumentAuditor(self._registry)
        self._scanners = list(scanners)
        self._time_budget = time_budget

    @classmethod
    def from_config(
        cls,
        config: ScannersConfig,
        registry: CriterionRegistry | None = None,
    ) -> "AuditRunner":
        """Build a runner with the scanners and time budget from configuration."""
        from wcag_audit.scanners import build_scanners

        return cls(
            registry=registry,
            scanners=build_scanners(config),
            time_budget=config.time_budget,
        )

    @property
    def registry(self) -> CriterionRegistry:
        """The registry in use."""
        return self._registry

    def run(self, documents: Sequence[Document]) -> AuditReport:
        """Audit every document and assemble the report.

        Args:
            documents: Documents in audit order

        Returns:
            AuditReport snapshot of the run
        """
        summary = RunSummary()
        audits: list[FileAudit] = []
        started = time.monotonic()

        for document in documents:
            if self._time_budget is not None and time.monotonic() - started > self._time_budget:
                logger.warning(
                    "Time budget of %ss exhausted; %d documents not audited",
                    self._time_budget,
                    len(documents) - len(audits),
                )
                break

            audit = self.audit_document(document)
            summary = fold(summary, audit.wcag, audit.scanner_results)
            audits.append(audit)

        assembler = ReportAssembler(self._registry, tools=[s.name for s in self._scanners])
        return assembler.assemble(summary, audits)

    def audit_document(self, document: Document) -> FileAudit:
        """Scan and audit one document."""
        log = get_logger_with_context("runner", path=document.path)
        log.info("Auditing %s", document.path)

        scanner_results: list[ScannerResult] = []
        if document.kind == DocumentKind.HTML:
            scanner_results = [scanner.scan(document) for scanner in self._scanners]

        result = self._auditor.audit(document)
        log.info(
            "%d WCAG findings, %d criteria failed",
            len(result.findings),
            len(result.failed_criteria),
        )
        return FileAudit(path=document.path, wcag=result, scanner_results=scanner_results)
