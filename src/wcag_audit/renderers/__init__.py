"""Output format renderers."""

from pathlib import Path

from wcag_audit.models.report import AuditReport
from wcag_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext, Renderer
from wcag_audit.renderers.json import JSONRenderer
from wcag_audit.renderers.html import HTMLRenderer
from wcag_audit.renderers.markdown import MarkdownRenderer
from wcag_audit.renderers.terminal import TerminalRenderer
from wcag_audit.utils.config import OutputConfig

__all__ = [
    "BaseRenderer",
    "OutputFormat",
    "RenderContext",
    "Renderer",
    "JSONRenderer",
    "HTMLRenderer",
    "MarkdownRenderer",
    "TerminalRenderer",
    "get_renderer",
    "write_reports",
]


def get_renderer(format: OutputFormat | str) -> BaseRenderer:
    """Get a renderer for the specified format.

    Args:
        format: Output format (OutputFormat enum or string)

    Returns:
        Appropriate renderer instance

    Raises:
        ValueError: If format is not supported
    """
    if isinstance(format, str):
        format = OutputFormat(format)

    renderers = {
        OutputFormat.JSON: JSONRenderer,
        OutputFormat.HTML: HTMLRenderer,
        OutputFormat.MARKDOWN: MarkdownRenderer,
        OutputFormat.TERMINAL: TerminalRenderer,
    }

    renderer_class = renderers.get(format)
    if renderer_class is None:
        raise ValueError(f"Unsupported format: {format}")

    return renderer_class()


def write_reports(report: AuditReport, output: OutputConfig) -> list[Path]:
    """Write every configured artifact, creating the output directory.

    Args:
        report: The assembled AuditReport
        output: Output configuration

    Returns:
        Paths written, in configured order
    """
    filenames = {
        OutputFormat.JSON: output.json_filename,
        OutputFormat.HTML: output.report_filename,
        OutputFormat.MARKDOWN: output.markdown_filename,
    }

    directory = Path(output.directory)
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for name in output.formats:
        fmt = OutputFormat(name)
        if fmt not in filenames:
            raise ValueError(f"Unsupported artifact format: {name}")
        path = directory / filenames[fmt]
        get_renderer(fmt).render_to_file(report, RenderContext(format=fmt, output_path=path))
        written.append(path)
    return written
