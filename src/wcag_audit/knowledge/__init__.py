"""WCAG knowledge base.

Contains the curated catalog of built-in success criteria.
"""

from wcag_audit.knowledge.wcag21 import get_wcag21_criteria

__all__ = [
    "get_wcag21_criteria",
]
