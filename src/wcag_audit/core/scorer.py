"""Aggregate scoring across audited documents."""

from __future__ import annotations

from typing import Iterable, Sequence

from wcag_audit.models.audit import AuditResult, RunSummary
from wcag_audit.models.criterion import ConformanceLevel, Severity
from wcag_audit.models.scanner import ScannerResult


def fold(
    summary: RunSummary,
    result: AuditResult,
    scanner_results: Sequence[ScannerResult] = (),
) -> RunSummary:
    """Fold one document's outcome into the run summary.

    Severity counters include third-party scanner findings. Level tallies
    are summed per document, not deduplicated across documents.

    Args:
        summary: Summary so far
        result: The document's audit result
        scanner_results: External scanner contributions for the document

    Returns:
        New RunSummary with this document added
    """
    critical = result.count(Severity.CRITICAL)
    warnings = result.count(Severity.WARNING)
    low = result.count(Severity.LOW)
    total = len(result.findings)

    for scanned in scanner_results:
        critical += scanned.count(Severity.CRITICAL)
        warnings += scanned.count(Severity.WARNING)
        low += scanned.count(Severity.LOW)
        total += len(scanned.findings)

    return summary.model_copy(
        update={
            "total_issues": summary.total_issues + total,
            "critical_issues": summary.critical_issues + critical,
            "warnings": summary.warnings + warnings,
            "low_issues": summary.low_issues + low,
            "documents_processed": summary.documents_processed + 1,
            "level_a": summary.level_a.combine(result.level_a),
            "level_aa": summary.level_aa.combine(result.level_aa),
        }
    )


def fold_all(
    results: Iterable[AuditResult],
    summary: RunSummary | None = None,
) -> RunSummary:
    """Fold a sequence of audit results, starting from an empty summary."""
    current = summary if summary is not None else RunSummary()
    for result in results:
        current = fold(current, result)
    return current


def compliance(summary: RunSummary, level: ConformanceLevel) -> float | None:
    """Percentage of passed criteria at a level, to one decimal place.

    Returns None when nothing was evaluated at that level. A level with any
    failure never reports 100.0.

    Args:
        summary: Run summary
        level: Conformance level

    Returns:
        Percentage, or None when the level total is zero
    """
    tally = summary.tally(level)
    if tally.total == 0:
        return None

    percentage = round(tally.passed / tally.total * 100, 1)
    if tally.failed and percentage >= 100.0:
        return 99.9
    return percentage


def format_compliance(value: float | None) -> str:
    """Render a compliance value for humans."""
    return "N/A" if value is None else f"{value:.1f}%"
