"""pa11y command-line scanner."""

from __future__ import annotations

from typing import Any

from wcag_audit.models.criterion import Severity
from wcag_audit.models.document import Document
from wcag_audit.models.scanner import ToolFinding
from wcag_audit.scanners.base import CommandScanner


class Pa11yScanner(CommandScanner):
    """Runs ``pa11y <file> --json``.

    pa11y exits with 2 when it found issues, so that code still counts as a
    successful run. Issues of type ``error`` are CRITICAL, the rest WARNING.
    """

    name = "pa11y"
    result_key = "pa11yTest"
    ok_exit_codes = (0, 2)

    def build_command(self, document: Document) -> list[str]:
        return [self._command, document.location, "--json"]

    def parse(self, data: Any) -> list[ToolFinding]:
        if not isinstance(data, list):
            raise ValueError("expected a list of issues")
        return [
            ToolFinding(
                tool=self.name,
                severity=Severity.CRITICAL if issue.get("type") == "error" else Severity.WARNING,
                message=issue.get("message", ""),
                code=issue.get("code"),
                selector=issue.get("selector"),
                context=issue.get("context"),
            )
            for issue in data
        ]
