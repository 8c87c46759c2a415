"""Unit tests for the DocumentAuditor."""

import pytest

from wcag_audit.core.auditor import DocumentAuditor
from wcag_audit.core.registry import CriterionRegistry
from wcag_audit.models.criterion import ConformanceLevel, Criterion, Severity
from wcag_audit.models.document import Document
from wcag_audit.utils.errors import EmptyRegistryError, RuleEvaluationError


class TestDocumentAuditor:
    """Tests for DocumentAuditor."""

    def test_accessible_page_passes(self, accessible_document: Document):
        """Test that a clean page raises no findings."""
        result = DocumentAuditor().audit(accessible_document)

        assert result.valid
        assert result.findings == []
        assert result.failed_criteria == []
        assert result.level_a.passed == 12
        assert result.level_aa.passed == 3

    def test_problem_page_findings(self, problem_document: Document):
        """Test findings and severities on a page with known problems."""
        result = DocumentAuditor().audit(problem_document)

        assert result.path == "templates/bad.html"
        assert len(result.findings) == 12
        assert result.count(Severity.CRITICAL) == 5
        assert result.count(Severity.WARNING) == 6
        assert result.count(Severity.LOW) == 1
        assert result.failed_criteria == [
            "1.1.1",
            "1.3.1",
            "2.1.1",
            "2.4.1",
            "2.4.2",
            "2.4.4",
            "2.4.6",
            "4.1.1",
            "4.1.2",
        ]

    def test_problem_page_tallies(self, problem_document: Document):
        """Test per-level pass/fail tallies."""
        result = DocumentAuditor().audit(problem_document)

        assert (result.level_a.total, result.level_a.passed, result.level_a.failed) == (12, 4, 8)
        assert (result.level_aa.total, result.level_aa.passed, result.level_aa.failed) == (3, 2, 1)

    def test_findings_follow_criterion_order(self, problem_document: Document):
        """Test that findings keep criterion evaluation order."""
        result = DocumentAuditor().audit(problem_document)

        criteria = [f.criterion for f in result.findings]
        assert criteria == sorted(criteria, key=result.failed_criteria.index)
        assert [f.message for f in result.findings_for("4.1.1")] == [
            "Mismatched tags: 11 open, 9 closed"
        ]

    def test_tally_invariant(self, problem_document: Document, accessible_document: Document):
        """Test that passed + failed always equals total, per level."""
        auditor = DocumentAuditor()
        for document in (problem_document, accessible_document, Document(path="empty.html")):
            result = auditor.audit(document)
            for level in ConformanceLevel:
                tally = result.tally(level)
                assert tally.passed + tally.failed == tally.total
                assert tally.total == auditor.registry.count_at(level)

    def test_empty_document(self):
        """Test that an empty document raises no findings."""
        result = DocumentAuditor().audit(Document(path="empty.html", content=""))

        assert result.valid
        assert result.level_a.failed == 0
        assert result.level_aa.failed == 0

    def test_idempotent(self, problem_document: Document):
        """Test that auditing the same document twice gives equal results."""
        auditor = DocumentAuditor()
        assert auditor.audit(problem_document) == auditor.audit(problem_document)

    def test_title_scenario(self):
        """Test an image without alt on an otherwise titled page."""
        content = '<title>Test</title><img src="x.png">'
        result = DocumentAuditor().audit(Document(path="t.html", content=content))

        assert [(f.criterion, f.severity) for f in result.findings_for("1.1.1")] == [
            ("1.1.1", Severity.CRITICAL)
        ]
        assert result.findings_for("2.4.2") == []

    def test_multiple_findings_fail_criterion_once(self, tiny_registry: CriterionRegistry):
        """Test that a criterion counts once regardless of its finding count."""
        registry = CriterionRegistry(
            [
                Criterion(
                    id="x.1",
                    name="Twice",
                    level=ConformanceLevel.A,
                    rule=lambda c: tiny_registry["t.1"].evaluate(c) * 2,
                )
            ]
        )
        result = DocumentAuditor(registry).audit(Document(path="a.html", content="x"))

        assert len(result.findings) == 2
        assert result.level_a.failed == 1
        assert result.level_a.total == 1
        assert result.failed_criteria == ["x.1"]

    def test_custom_registry(self, tiny_registry: CriterionRegistry):
        """Test auditing against a custom registry."""
        result = DocumentAuditor(tiny_registry).audit(Document(path="a.html", content="<p>hi</p>"))

        assert result.failed_criteria == ["t.1"]
        assert (result.level_a.total, result.level_a.passed, result.level_a.failed) == (2, 1, 1)
        assert (result.level_aa.total, result.level_aa.passed, result.level_aa.failed) == (1, 1, 0)

    def test_empty_registry_rejected(self):
        """Test that an auditor needs at least one criterion."""
        with pytest.raises(EmptyRegistryError):
            DocumentAuditor(CriterionRegistry())

    def test_rule_error_wrapped(self):
        """Test that a raising rule aborts with RuleEvaluationError."""

        def broken(content: str):
            raise RuntimeError("boom")

        registry = CriterionRegistry(
            [Criterion(id="b.1", name="Broken", level=ConformanceLevel.A, rule=broken)]
        )

        with pytest.raises(RuleEvaluationError) as exc_info:
            DocumentAuditor(registry).audit(Document(path="a.html", content="x"))

        assert exc_info.value.code == "RULE_ERROR"
        assert exc_info.value.details == {"criterion": "b.1", "path": "a.html"}
        assert isinstance(exc_info.value.__cause__, RuntimeError)
