"""Base scanner protocol and subprocess plumbing."""

from __future__ import annotations

import json
import subprocess
from typing import Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from wcag_audit.models.document import Document
from wcag_audit.models.scanner import ScannerResult, ToolFinding
from wcag_audit.utils.errors import ScannerError
from wcag_audit.utils.logging import get_logger

logger = get_logger("scanners")


class CommandOutput(BaseModel):
    """Captured output of an external command."""

    model_config = {"frozen": True}

    returncode: int = Field(description="Process exit code")
    stdout: str = Field(default="")
    stderr: str = Field(default="")


CommandRunner = Callable[[list[str], float], CommandOutput]


def run_command(args: list[str], timeout: float) -> CommandOutput:
    """Run a command and capture its output.

    Args:
        args: Command and arguments
        timeout: Seconds before the process is killed

    Returns:
        CommandOutput with exit code and captured streams

    Raises:
        ScannerError: If the executable is missing, cannot be started,
            or the command times out
    """
    try:
        completed = subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise ScannerError(args[0], f"executable not found ({e})") from e
    except subprocess.TimeoutExpired as e:
        raise ScannerError(args[0], f"timed out after {timeout}s") from e
    except OSError as e:
        raise ScannerError(args[0], f"could not be started ({e})") from e

    return CommandOutput(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


@runtime_checkable
class Scanner(Protocol):
    """Protocol for external accessibility scanners.

    A scanner turns one document into a ScannerResult. Failures are never
    raised to the caller; they produce an empty contribution instead.

    Example:
        class FakeScanner:
            name = "fake"
            result_key = "fakeTest"

            def scan(self, document: Document) -> ScannerResult:
                return ScannerResult.ok(self.name, self.result_key, [])
    """

    @property
    def name(self) -> str:
        """Tool name listed in the report."""
        ...

    @property
    def result_key(self) -> str:
        """Key of this tool's section in each file entry of the snapshot."""
        ...

    def scan(self, document: Document) -> ScannerResult:
        """Scan a document."""
        ...


class CommandScanner:
    """Base for scanners that shell out and parse JSON from stdout.

    Subclasses set ``name``, ``result_key`` and ``ok_exit_codes`` and
    implement ``build_command`` and ``parse``.
    """

    name = "command"
    result_key = "commandTest"
    ok_exit_codes: tuple[int, ...] = (0,)

    def __init__(
        self,
        command: str | None = None,
        timeout: float = 120.0,
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            command: Executable to invoke (defaults per scanner)
            timeout: Per-document timeout in seconds
            runner: Command runner, injectable for tests
        """
        self._command = command or self.default_command()
        self._timeout = timeout
        self._runner = runner or run_command

    def default_command(self) -> str:
        return self.name

    def build_command(self, document: Document) -> list[str]:
        raise NotImplementedError

    def parse(self, data: Any) -> list[ToolFinding]:
        raise NotImplementedError

    def scan(self, document: Document) -> ScannerResult:
        """Run the tool over a document, recovering from every failure."""
        try:
            output = self._runner(self.build_command(document), self._timeout)
            if output.returncode not in self.ok_exit_codes:
                detail = output.stderr.strip() or f"exit code {output.returncode}"
                raise ScannerError(self.name, detail)
            try:
                data = json.loads(output.stdout)
            except json.JSONDecodeError as e:
                raise ScannerError(self.name, f"unparsable output: {e}") from e
            try:
                findings = self.parse(data)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise ScannerError(self.name, f"unexpected output shape: {e}") from e
        except ScannerError as e:
            logger.warning("%s produced no usable results for %s: %s", self.name, document.path, e)
            return ScannerResult.empty(self.name, self.result_key, e.to_audit_error())

        logger.debug("%s reported %d issues for %s", self.name, len(findings), document.path)
        return ScannerResult.ok(self.name, self.result_key, findings)
