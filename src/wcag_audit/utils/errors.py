"""Error handling utilities for wcag-audit."""

from __future__ import annotations

from typing import Any

from wcag_audit.models.scanner import AuditError


class WcagAuditError(Exception):
    """Base exception for wcag-audit."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_audit_error(self) -> AuditError:
        """Convert to AuditError model."""
        return AuditError(code=self.code, message=self.message, details=self.details)


class ConfigurationError(WcagAuditError):
    """Configuration error. Fatal: raised before any document is processed."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        code: str = "CONFIG_ERROR",
    ):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code=code, details=details)


class DuplicateCriterionError(ConfigurationError):
    """A criterion identifier was registered twice."""

    def __init__(self, criterion_id: str):
        super().__init__(
            f"Criterion '{criterion_id}' is already registered",
            config_key=criterion_id,
            code="DUPLICATE_CRITERION",
        )
        self.criterion_id = criterion_id


class RegistrySealedError(ConfigurationError):
    """Registration was attempted after the registry was sealed."""

    def __init__(self, criterion_id: str):
        super().__init__(
            f"Cannot register '{criterion_id}': registry is sealed",
            config_key=criterion_id,
            code="REGISTRY_SEALED",
        )


class EmptyRegistryError(ConfigurationError):
    """An auditor was built over a registry with no criteria."""

    def __init__(self) -> None:
        super().__init__("No criteria are registered", code="EMPTY_REGISTRY")


class RuleEvaluationError(WcagAuditError):
    """A rule raised while evaluating a document. Indicates a defective rule."""

    def __init__(self, criterion_id: str, path: str, cause: Exception):
        super().__init__(
            f"Rule for criterion {criterion_id} failed on {path}: {cause}",
            code="RULE_ERROR",
            details={"criterion": criterion_id, "path": path},
        )


class ScannerError(WcagAuditError):
    """An external scanner could not produce usable output."""

    def __init__(self, tool: str, message: str):
        super().__init__(f"{tool}: {message}", code="SCANNER_ERROR", details={"tool": tool})
        self.tool = tool


class DocumentNotFoundError(WcagAuditError):
    """A configured document path does not resolve."""

    def __init__(self, path: str):
        super().__init__(
            f"Document not found: {path}",
            code="DOCUMENT_NOT_FOUND",
            details={"path": path},
        )
        self.path = path
