"""Shared test fixtures for wcag-audit tests."""

import json
import logging
import sys
from pathlib import Path

import pytest

from wcag_audit.core.registry import CriterionRegistry, get_default_registry
from wcag_audit.models.criterion import ConformanceLevel, Criterion, Finding, Severity
from wcag_audit.models.document import Document
from wcag_audit.models.scanner import ScannerResult, ToolFinding
from wcag_audit.scanners.base import CommandOutput
from wcag_audit.utils.logging import ROOT_LOGGER

# Tag-balanced, so the parsing check passes; void elements would count as
# unclosed tags.
ACCESSIBLE_PAGE = """<html lang="en">
<head>
<title>Atlas of Drowned Towns</title>
</head>
<body>
<a class="skip-link" href="#main">Skip to main content</a>
<nav role="navigation"><a href="/map">Interactive map</a></nav>
<main id="main" role="main">
<h1>Drowned towns</h1>
<h2>Reservoir history</h2>
<button type="button">Open map</button>
</main>
</body>
</html>
"""

PROBLEM_PAGE = """<html>
<head><title></title></head>
<body>
<div class="wrapper">
<h1>Map</h1>
<h3>Go</h3>
<img src="logo.png">
<a href="/more">click here</a>
<button onclick="openMap()"></button>
<input name="q">
</div>
</body>
</html>
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo CLI logging configuration so caplog sees records."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def accessible_document() -> Document:
    """A page that passes every built-in criterion."""
    return Document(path="templates/good.html", content=ACCESSIBLE_PAGE)


@pytest.fixture
def problem_document() -> Document:
    """A page that fails several criteria."""
    return Document(path="templates/bad.html", content=PROBLEM_PAGE)


@pytest.fixture
def registry() -> CriterionRegistry:
    """The built-in criteria registry."""
    return get_default_registry()


def _always(criterion_id: str, severity: Severity):
    def rule(content: str) -> list[Finding]:
        return [Finding(criterion=criterion_id, severity=severity, message="always")]

    return rule


def _never(content: str) -> list[Finding]:
    return []


@pytest.fixture
def tiny_registry() -> CriterionRegistry:
    """Two A criteria (one always failing) and one AA criterion that never fails."""
    return CriterionRegistry(
        [
            Criterion(
                id="t.1",
                name="Always fails",
                level=ConformanceLevel.A,
                rule=_always("t.1", Severity.CRITICAL),
            ),
            Criterion(id="t.2", name="Never fails", level=ConformanceLevel.A, rule=_never),
            Criterion(id="t.3", name="Never fails AA", level=ConformanceLevel.AA, rule=_never),
        ]
    ).seal()


class FakeScanner:
    """Scanner stand-in returning canned findings."""

    def __init__(self, name: str, result_key: str, findings: list[ToolFinding] | None = None):
        self.name = name
        self.result_key = result_key
        self._findings = findings or []
        self.scanned: list[str] = []

    def scan(self, document: Document) -> ScannerResult:
        self.scanned.append(document.path)
        return ScannerResult.ok(self.name, self.result_key, list(self._findings))


@pytest.fixture
def fake_axe() -> FakeScanner:
    """Fake axe-core scanner reporting one critical violation per document."""
    return FakeScanner(
        "axe-core",
        "accessibilityTest",
        [
            ToolFinding(
                tool="axe-core",
                severity=Severity.CRITICAL,
                message="Images must have alternate text (critical)",
                help="Images must have alternate text",
                help_url="https://dequeuniversity.com/rules/axe/4.8/image-alt",
                tags=["wcag2a", "wcag111"],
                nodes=1,
            )
        ],
    )


@pytest.fixture
def fake_pa11y() -> FakeScanner:
    """Fake pa11y scanner reporting one warning per document."""
    return FakeScanner(
        "pa11y",
        "pa11yTest",
        [
            ToolFinding(
                tool="pa11y",
                severity=Severity.WARNING,
                message="Check that the title describes the page",
                code="WCAG2AA.Principle2.Guideline2_4.2_4_2.H25.2",
                selector="html > head > title",
                context="<title>Atlas</title>",
            )
        ],
    )


class FakeRunner:
    """Command runner stand-in recording invocations."""

    def __init__(self, output: CommandOutput | None = None, error: Exception | None = None):
        self.output = output
        self.error = error
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str], timeout: float) -> CommandOutput:
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def fake_runner():
    """Factory for command runner stand-ins."""
    return FakeRunner


@pytest.fixture
def axe_output() -> str:
    """Sample axe-cli JSON output."""
    return json.dumps(
        [
            {
                "url": "file:///templates/base.html",
                "violations": [
                    {
                        "id": "image-alt",
                        "impact": "critical",
                        "description": "Ensures <img> elements have alternate text",
                        "help": "Images must have alternate text",
                        "helpUrl": "https://dequeuniversity.com/rules/axe/4.8/image-alt",
                        "tags": ["cat.text-alternatives", "wcag2a", "wcag111"],
                        "nodes": [{"target": ["img"]}, {"target": ["img.logo"]}],
                    }
                ],
            }
        ]
    )


@pytest.fixture
def pa11y_output() -> str:
    """Sample pa11y JSON output."""
    return json.dumps(
        [
            {
                "code": "WCAG2AA.Principle1.Guideline1_1.1_1_1.H37",
                "type": "error",
                "message": "Img element missing an alt attribute.",
                "context": '<img src="logo.png">',
                "selector": "html > body > img",
            },
            {
                "code": "WCAG2AA.Principle1.Guideline1_3.1_3_1.H42",
                "type": "warning",
                "message": "Heading markup should be used if this content is intended as a heading.",
                "context": "<p><strong>Title</strong></p>",
                "selector": "html > body > p",
            },
        ]
    )


@pytest.fixture
def template_tree(tmp_path):
    """A project directory with two of the configured templates present."""
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "base.html").write_text(ACCESSIBLE_PAGE)
    (templates / "footer.html").write_text(PROBLEM_PAGE)
    css = tmp_path / "static" / "css"
    css.mkdir(parents=True)
    (css / "main.css").write_text("a:focus { outline: none; }\nbody { color: #333; }\n")
    return tmp_path


@pytest.fixture
def tool_script(tmp_path):
    """Factory writing an executable Python script that stands in for a CLI tool."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def make(name: str, body: str, mode: int = 0o755) -> Path:
        script = bin_dir / name
        script.write_text(f"#!{sys.executable}\nimport sys\n{body}\n")
        script.chmod(mode)
        return script

    return make
