"""Document auditor: evaluates every registered criterion against a document."""

from __future__ import annotations

from wcag_audit.core.registry import CriterionRegistry, get_default_registry
from wcag_audit.models.audit import AuditResult, LevelTally
from wcag_audit.models.criterion import ConformanceLevel, Finding
from wcag_audit.models.document import Document
from wcag_audit.utils.errors import EmptyRegistryError, RuleEvaluationError
from wcag_audit.utils.logging import get_logger

logger = get_logger("auditor")


class DocumentAuditor:
    """Runs a registry's criteria over documents.

    A criterion fails for a document when its rule raises at least one
    finding, no matter how many. Findings keep criterion evaluation order.

    Example:
        auditor = DocumentAuditor()
        result = auditor.audit(Document(path="index.html", content=html))

        for finding in result.findings:
            print(f"{finding.criterion} {finding.severity}: {finding.message}")
    """

    def __init__(self, registry: CriterionRegistry | None = None) -> None:
        """Initialize the auditor.

        Args:
            registry: Criteria to evaluate. Defaults to the built-in catalog.

        Raises:
            EmptyRegistryError: If the registry holds no criteria
        """
        self._registry = registry if registry is not None else get_default_registry()
        if len(self._registry) == 0:
            raise EmptyRegistryError()

    @property
    def registry(self) -> CriterionRegistry:
        """The registry this auditor evaluates."""
        return self._registry

    def audit(self, document: Document) -> AuditResult:
        """Audit one document.

        Args:
            document: The document to audit

        Returns:
            AuditResult with findings and per-level tallies

        Raises:
            RuleEvaluationError: If a rule raises. Rules are total, so this
                is a defect and aborts the run.
        """
        findings: list[Finding] = []
        failed: list[str] = []
        passed_count = {ConformanceLevel.A: 0, ConformanceLevel.AA: 0}
        failed_count = {ConformanceLevel.A: 0, ConformanceLevel.AA: 0}

        for criterion in self._registry.all():
            try:
                raised = criterion.evaluate(document.content)
            except Exception as e:
                raise RuleEvaluationError(criterion.id, document.path, e) from e

            if raised:
                findings.extend(raised)
                failed.append(criterion.id)
                failed_count[criterion.level] += 1
            else:
                passed_count[criterion.level] += 1

            logger.debug(
                "%s %s on %s (%d findings)",
                criterion.id,
                "failed" if raised else "passed",
                document.path,
                len(raised),
            )

        return AuditResult(
            path=document.path,
            findings=findings,
            level_a=self._tally(passed_count, failed_count, ConformanceLevel.A),
            level_aa=self._tally(passed_count, failed_count, ConformanceLevel.AA),
            failed_criteria=failed,
        )

    @staticmethod
    def _tally(
        passed: dict[ConformanceLevel, int],
        failed: dict[ConformanceLevel, int],
        level: ConformanceLevel,
    ) -> LevelTally:
        return LevelTally(
            total=passed[level] + failed[level],
            passed=passed[level],
            failed=failed[level],
        )
