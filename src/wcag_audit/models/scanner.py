"""Third-party scanner result models."""

from typing import Any

from pydantic import BaseModel, Field

from wcag_audit.models.criterion import Severity


class AuditError(BaseModel):
    """A failure recovered from during a run, recorded instead of results."""

    model_config = {"frozen": True}

    code: str = Field(description="Error code, e.g. SCANNER_ERROR")
    message: str = Field(description="What went wrong")
    details: dict[str, Any] = Field(default_factory=dict)

    @property
    def tool(self) -> str | None:
        """Scanner that failed, when the error came from one."""
        return self.details.get("tool")

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ToolFinding(BaseModel):
    """A finding reported by an external scanner, kept in the scanner's own shape."""

    model_config = {"frozen": True}

    tool: str = Field(serialization_alias="type", description="Scanner that reported it")
    severity: Severity = Field(description="Severity mapped from the scanner")
    message: str = Field(description="Scanner message")

    # axe-core fields
    help: str | None = Field(default=None)
    help_url: str | None = Field(default=None, serialization_alias="helpUrl")
    tags: list[str] | None = Field(default=None)
    nodes: int | None = Field(default=None, description="Number of affected nodes")

    # pa11y fields
    code: str | None = Field(default=None)
    selector: str | None = Field(default=None)
    context: str | None = Field(default=None)


class ScannerResult(BaseModel):
    """Contribution of one external scanner for one document."""

    model_config = {"frozen": True}

    tool: str = Field(description="Scanner name")
    result_key: str = Field(description="Key used for this scanner in the JSON snapshot")
    findings: list[ToolFinding] = Field(default_factory=list)
    errors: list[AuditError] = Field(
        default_factory=list,
        description="Recovered failures; the contribution is empty when present",
    )

    @property
    def valid(self) -> bool:
        """True when the scanner reported nothing."""
        return not self.findings

    @classmethod
    def ok(cls, tool: str, result_key: str, findings: list[ToolFinding]) -> "ScannerResult":
        """Create a result carrying findings."""
        return cls(tool=tool, result_key=result_key, findings=findings)

    @classmethod
    def empty(
        cls,
        tool: str,
        result_key: str,
        error: AuditError | None = None,
    ) -> "ScannerResult":
        """Create an empty contribution, optionally recording why."""
        return cls(tool=tool, result_key=result_key, errors=[error] if error else [])

    def count(self, severity: Severity) -> int:
        """Count findings of a given severity."""
        return sum(1 for f in self.findings if f.severity == severity)

    def issues(self) -> list[dict[str, Any]]:
        """Findings projected to their JSON form."""
        return [
            f.model_dump(mode="json", by_alias=True, exclude_none=True)
            for f in self.findings
        ]
