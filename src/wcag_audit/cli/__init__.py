"""Command-line interface for wcag-audit."""
