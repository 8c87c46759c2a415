"""Utility functions for wcag-audit."""

from wcag_audit.utils.logging import configure_logging, get_logger, get_logger_with_context
from wcag_audit.utils.errors import (
    WcagAuditError,
    ConfigurationError,
    DuplicateCriterionError,
    RegistrySealedError,
    EmptyRegistryError,
    RuleEvaluationError,
    ScannerError,
    DocumentNotFoundError,
)
from wcag_audit.utils.config import (
    WcagAuditConfig,
    TargetsConfig,
    OutputConfig,
    ScannersConfig,
    ToolConfig,
    load_config,
    save_config,
    get_config,
    set_config,
    get_default_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "WcagAuditError",
    "ConfigurationError",
    "DuplicateCriterionError",
    "RegistrySealedError",
    "EmptyRegistryError",
    "RuleEvaluationError",
    "ScannerError",
    "DocumentNotFoundError",
    # Config
    "WcagAuditConfig",
    "TargetsConfig",
    "OutputConfig",
    "ScannersConfig",
    "ToolConfig",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
    "get_default_config",
]
