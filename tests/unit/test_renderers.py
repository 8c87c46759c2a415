"""Unit tests for output renderers."""

import io
import json
from datetime import datetime, timezone

import pytest
from rich.console import Console

from wcag_audit.core.assembler import ReportAssembler
from wcag_audit.core.auditor import DocumentAuditor
from wcag_audit.core.registry import CriterionRegistry
from wcag_audit.core.scorer import fold
from wcag_audit.models.audit import RunSummary
from wcag_audit.models.document import Document
from wcag_audit.models.report import AuditReport, FileAudit
from wcag_audit.renderers import (
    HTMLRenderer,
    JSONRenderer,
    MarkdownRenderer,
    OutputFormat,
    RenderContext,
    Renderer,
    TerminalRenderer,
    get_renderer,
    write_reports,
)
from wcag_audit.utils.config import OutputConfig


def _report(registry: CriterionRegistry, *documents: Document, scanners=()) -> AuditReport:
    auditor = DocumentAuditor(registry)
    summary = RunSummary()
    audits = []
    for document in documents:
        audit = FileAudit(
            path=document.path,
            wcag=auditor.audit(document),
            scanner_results=[s.scan(document) for s in scanners],
        )
        summary = fold(summary, audit.wcag, audit.scanner_results)
        audits.append(audit)
    return ReportAssembler(registry, tools=[s.name for s in scanners]).assemble(
        summary, audits, timestamp=datetime(2024, 5, 1, tzinfo=timezone.utc)
    )


@pytest.fixture
def report(registry, problem_document, accessible_document, fake_axe) -> AuditReport:
    return _report(registry, problem_document, accessible_document, scanners=[fake_axe])


class TestGetRenderer:
    """Tests for renderer lookup."""

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("json", JSONRenderer),
            ("html", HTMLRenderer),
            ("markdown", MarkdownRenderer),
            ("terminal", TerminalRenderer),
        ],
    )
    def test_lookup(self, name, cls):
        """Test getting each renderer by name."""
        renderer = get_renderer(name)
        assert isinstance(renderer, cls)
        assert isinstance(renderer, Renderer)
        assert renderer.format == OutputFormat(name)

    def test_unknown_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValueError):
            get_renderer("pdf")


class TestJSONRenderer:
    """Tests for JSONRenderer."""

    def test_render(self, report: AuditReport):
        """Test that output parses and matches the snapshot."""
        output = JSONRenderer().render(report, RenderContext(format=OutputFormat.JSON))
        data = json.loads(output)

        assert data == report.to_snapshot()
        assert data["tools"] == ["axe-core", "WCAG 2.1 AA Analysis"]
        assert data["summary"]["totalIssues"] == 14
        assert data["summary"]["criticalIssues"] == 7
        assert data["files"]["templates/good.html"]["totalIssues"] == 1

    def test_compact(self, report: AuditReport):
        """Test rendering without indentation."""
        output = JSONRenderer().render(report, RenderContext(indent=0))
        assert "\n" not in output


class TestHTMLRenderer:
    """Tests for HTMLRenderer."""

    def test_structure(self, report: AuditReport):
        """Test the main sections of the narrative."""
        html = HTMLRenderer().render(report, RenderContext(format=OutputFormat.HTML))

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Comprehensive Accessibility Test Report</title>" in html
        assert "Executive Summary" in html
        assert "WCAG 2.1 Level A" in html
        assert "WCAG 2.1 Level AA" in html
        assert "66.7%" in html
        assert "Axe-core Accessibility Issues" in html
        assert "WCAG Compliance Issues" in html
        assert "WCAG 2.1 AA Criteria Details" in html
        assert "Name, Role, Value" in html

    def test_escapes_markup(self, report: AuditReport):
        """Test that element excerpts and messages are escaped."""
        html = HTMLRenderer().render(report, RenderContext())

        assert '<code>&lt;img src=&quot;logo.png&quot;&gt;</code>' in html
        assert "&quot;click here&quot;" in html
        assert '<img src="logo.png">' not in html

    def test_escapes_path(self, registry: CriterionRegistry):
        """Test that file paths are escaped."""
        report = _report(registry, Document(path="<script>.html", content="<title>x</title>"))
        html = HTMLRenderer().render(report, RenderContext())

        assert "<h3>&lt;script&gt;.html</h3>" in html
        assert "<script>" not in html

    def test_clean_file(self, registry: CriterionRegistry, accessible_document: Document):
        """Test the message for a file without issues."""
        html = HTMLRenderer().render(_report(registry, accessible_document), RenderContext())
        assert "No accessibility issues found" in html

    def test_empty_run(self, registry: CriterionRegistry):
        """Test that compliance shows N/A when nothing was audited."""
        html = HTMLRenderer().render(_report(registry), RenderContext())
        assert "N/A" in html

    def test_custom_title(self, report: AuditReport):
        """Test overriding the title."""
        html = HTMLRenderer().render(report, RenderContext(title="Atlas & Co"))
        assert "<title>Atlas &amp; Co</title>" in html


class TestMarkdownRenderer:
    """Tests for MarkdownRenderer."""

    def test_render(self, report: AuditReport):
        """Test the Markdown narrative."""
        md = MarkdownRenderer().render(report, RenderContext(format=OutputFormat.MARKDOWN))

        assert md.startswith("# Comprehensive Accessibility Test Report")
        assert "| A | 66.7% | 16 | 8 | 24 |" in md
        assert "## `templates/bad.html`" in md
        assert "| CRITICAL | 1.1.1 | Image 1 missing alt attribute |" in md

    def test_verbose_criteria(self, report: AuditReport):
        """Test that criteria details are only shown when verbose."""
        assert "## Criteria Details" not in MarkdownRenderer().render(report, RenderContext())
        assert "## Criteria Details" in MarkdownRenderer().render(report, RenderContext(verbose=True))

    def test_escape_pipes(self):
        """Test escaping table separators."""
        assert MarkdownRenderer._escape_md("a|b\nc") == "a\\|b c"


class TestTerminalRenderer:
    """Tests for TerminalRenderer."""

    def test_render(self, report: AuditReport):
        """Test printing the summary tables."""
        console = Console(record=True, file=io.StringIO(), width=200)
        TerminalRenderer(console).render(report, RenderContext(verbose=True))
        output = console.export_text()

        assert "Summary" in output
        assert "WCAG 2.1 Compliance" in output
        assert "templates/bad.html" in output
        assert "Image 1 missing alt attribute" in output

    def test_render_to_file(self, report: AuditReport, tmp_path):
        """Test recording terminal output to a file."""
        path = tmp_path / "report.txt"
        TerminalRenderer().render_to_file(report, RenderContext(output_path=path))

        assert "Files Tested" in path.read_text()


class TestWriteReports:
    """Tests for writing configured artifacts."""

    def test_default_artifacts(self, report: AuditReport, tmp_path):
        """Test writing the JSON snapshot and HTML narrative."""
        output = OutputConfig(directory=str(tmp_path / "results"))
        written = write_reports(report, output)

        assert [p.name for p in written] == [
            "comprehensive_accessibility_results.json",
            "comprehensive_accessibility_report.html",
        ]
        assert all(p.exists() for p in written)
        assert json.loads(written[0].read_text())["summary"]["totalIssues"] == 14

    def test_markdown_artifact(self, report: AuditReport, tmp_path):
        """Test writing Markdown as well."""
        output = OutputConfig(directory=str(tmp_path), formats=["json", "markdown"])
        written = write_reports(report, output)

        assert written[1].name == "comprehensive_accessibility_report.md"

    def test_terminal_not_an_artifact(self, report: AuditReport, tmp_path):
        """Test that terminal output cannot be written as an artifact."""
        with pytest.raises(ValueError):
            write_reports(report, OutputConfig(directory=str(tmp_path), formats=["terminal"]))

    def test_no_output_path(self, report: AuditReport):
        """Test that file rendering needs a path."""
        with pytest.raises(ValueError):
            JSONRenderer().render_to_file(report, RenderContext())
