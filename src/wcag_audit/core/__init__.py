"""Core domain logic for wcag-audit.

This module provides the main library API for auditing documents.
"""

from wcag_audit.core.registry import CriterionRegistry, get_default_registry
from wcag_audit.core.auditor import DocumentAuditor
from wcag_audit.core.scorer import compliance, fold, fold_all, format_compliance
from wcag_audit.core.assembler import ReportAssembler
from wcag_audit.core.documents import load_documents, read_document
from wcag_audit.core.runner import AuditRunner

__all__ = [
    "CriterionRegistry",
    "get_default_registry",
    "DocumentAuditor",
    "compliance",
    "fold",
    "fold_all",
    "format_compliance",
    "ReportAssembler",
    "load_documents",
    "read_document",
    "AuditRunner",
]
