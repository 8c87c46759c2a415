"""Criterion and finding data models."""

from enum import Enum
from typing import Callable

from pydantic import BaseModel, Field


class ConformanceLevel(str, Enum):
    """WCAG conformance level of a success criterion."""

    A = "A"
    AA = "AA"


class Severity(str, Enum):
    """Severity of a finding."""

    CRITICAL = "CRITICAL"
    WARNING = "WARNING"
    LOW = "LOW"


class Finding(BaseModel):
    """A single issue raised by one criterion against one document."""

    model_config = {"frozen": True}

    criterion: str = Field(description="Identifier of the criterion that raised it")
    severity: Severity = Field(description="Finding severity")
    message: str = Field(description="Human-readable message")
    element: str | None = Field(default=None, description="Offending markup excerpt")
    recommendation: str | None = Field(default=None, description="How to fix it")


class Criterion(BaseModel):
    """A WCAG success criterion paired with its evaluation rule."""

    model_config = {"frozen": True}

    id: str = Field(description="Stable criterion identifier, e.g. '1.1.1'")
    name: str = Field(description="Display name")
    level: ConformanceLevel = Field(description="Conformance level")
    description: str = Field(default="", description="Criterion description")
    rule: Callable[[str], list[Finding]] = Field(
        exclude=True,
        description="Pure function from document content to findings",
    )

    def evaluate(self, content: str) -> list[Finding]:
        """Run this criterion's rule against document content."""
        return list(self.rule(content))
