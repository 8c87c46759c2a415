"""Per-document audit results and run-wide summary models."""

from pydantic import BaseModel, Field, computed_field

from wcag_audit.models.criterion import ConformanceLevel, Finding, Severity


class LevelTally(BaseModel):
    """Pass/fail tally for one conformance level."""

    model_config = {"frozen": True}

    total: int = Field(default=0, ge=0, description="Criteria evaluated")
    passed: int = Field(default=0, ge=0, description="Criteria with no findings")
    failed: int = Field(default=0, ge=0, description="Criteria with at least one finding")

    def combine(self, other: "LevelTally") -> "LevelTally":
        """Add another tally field by field."""
        return LevelTally(
            total=self.total + other.total,
            passed=self.passed + other.passed,
            failed=self.failed + other.failed,
        )


class AuditResult(BaseModel):
    """Outcome of evaluating every registered criterion against one document."""

    model_config = {"frozen": True}

    path: str = Field(description="Audited document path")
    findings: list[Finding] = Field(
        default_factory=list,
        description="Findings in criterion evaluation order",
    )
    level_a: LevelTally = Field(default_factory=LevelTally)
    level_aa: LevelTally = Field(default_factory=LevelTally)
    failed_criteria: list[str] = Field(
        default_factory=list,
        description="Identifiers of criteria that raised findings",
    )

    @property
    def valid(self) -> bool:
        """True when no criterion raised a finding."""
        return not self.findings

    def tally(self, level: ConformanceLevel) -> LevelTally:
        """Get the tally for a conformance level."""
        return self.level_a if level == ConformanceLevel.A else self.level_aa

    def count(self, severity: Severity) -> int:
        """Count findings of a given severity."""
        return sum(1 for f in self.findings if f.severity == severity)

    def findings_for(self, criterion_id: str) -> list[Finding]:
        """Get the findings raised by one criterion."""
        return [f for f in self.findings if f.criterion == criterion_id]


class RunSummary(BaseModel):
    """Cumulative counters across every document in one run.

    Summaries are immutable; the scorer produces a new one per folded document.
    """

    model_config = {"frozen": True}

    total_issues: int = Field(default=0, serialization_alias="totalIssues")
    critical_issues: int = Field(default=0, serialization_alias="criticalIssues")
    warnings: int = Field(default=0, serialization_alias="warnings")
    low_issues: int = Field(default=0, exclude=True)
    documents_processed: int = Field(default=0, serialization_alias="passedTests")
    level_a: LevelTally = Field(default_factory=LevelTally, exclude=True)
    level_aa: LevelTally = Field(default_factory=LevelTally, exclude=True)

    def tally(self, level: ConformanceLevel) -> LevelTally:
        """Get the cumulative tally for a conformance level."""
        return self.level_a if level == ConformanceLevel.A else self.level_aa

    @computed_field(alias="wcagCompliance")
    @property
    def wcag_compliance(self) -> dict[str, LevelTally]:
        """Per-level tallies keyed the way the JSON snapshot expects."""
        return {"levelA": self.level_a, "levelAA": self.level_aa}
