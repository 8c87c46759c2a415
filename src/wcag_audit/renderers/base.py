"""Base renderer protocol and types."""

from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from wcag_audit.models.report import AuditReport


class OutputFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    HTML = "html"
    MARKDOWN = "markdown"
    TERMINAL = "terminal"


class RenderContext(BaseModel):
    """Context for rendering operations."""

    model_config = {"frozen": True}

    format: OutputFormat = Field(default=OutputFormat.TERMINAL, description="Output format")
    output_path: Path | None = Field(default=None, description="Output file path")
    verbose: bool = Field(default=False, description="Include per-finding detail")
    indent: int = Field(default=2, description="JSON indentation")
    title: str = Field(
        default="Comprehensive Accessibility Test Report",
        description="Heading used by narrative formats",
    )


@runtime_checkable
class Renderer(Protocol):
    """Protocol for report renderers.

    Renderers turn an AuditReport into a machine-readable snapshot or a
    narrative document.
    """

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        ...

    def render(self, report: AuditReport, context: RenderContext) -> str:
        """Render a report to a string."""
        ...

    def render_to_file(self, report: AuditReport, context: RenderContext) -> None:
        """Render a report to ``context.output_path``."""
        ...


class BaseRenderer:
    """Base implementation providing ``render_to_file``.

    Subclasses implement the ``format`` property and ``render``.
    """

    def render_to_file(self, report: AuditReport, context: RenderContext) -> None:
        """Render a report directly to a file, creating parent directories.

        Raises:
            ValueError: If context.output_path is not set
        """
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        content = self.render(report, context)
        context.output_path.parent.mkdir(parents=True, exist_ok=True)
        context.output_path.write_text(content, encoding="utf-8")

    def render(self, report: AuditReport, context: RenderContext) -> str:
        """Render a report to a string. Must be implemented by subclasses."""
        raise NotImplementedError
