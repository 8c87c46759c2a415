"""axe-core command-line scanner."""

from __future__ import annotations

from typing import Any

from wcag_audit.models.criterion import Severity
from wcag_audit.models.document import Document
from wcag_audit.models.scanner import ToolFinding
from wcag_audit.scanners.base import CommandScanner


class AxeScanner(CommandScanner):
    """Runs ``axe <file> --format=json`` and maps violations to findings.

    Every violation is reported as CRITICAL. The CLI may print a single
    result object or a list of them (one per page); both are accepted.
    """

    name = "axe-core"
    result_key = "accessibilityTest"

    def default_command(self) -> str:
        return "axe"

    def build_command(self, document: Document) -> list[str]:
        return [self._command, document.location, "--format=json"]

    def parse(self, data: Any) -> list[ToolFinding]:
        pages = data if isinstance(data, list) else [data]
        findings = []
        for page in pages:
            for violation in page.get("violations", []):
                findings.append(
                    ToolFinding(
                        tool=self.name,
                        severity=Severity.CRITICAL,
                        message=f"{violation.get('description', '')} ({violation.get('impact')})",
                        help=violation.get("help"),
                        help_url=violation.get("helpUrl"),
                        tags=list(violation.get("tags", [])),
                        nodes=len(violation.get("nodes", [])),
                    )
                )
        return findings
