"""Document source: resolves configured paths into documents."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from wcag_audit.models.document import Document
from wcag_audit.utils.errors import DocumentNotFoundError
from wcag_audit.utils.logging import get_logger

logger = get_logger("documents")


def read_document(path: str, base_dir: Path | str = ".") -> Document:
    """Read one document.

    The document keeps the path as given, so reports show configured paths.
    The resolved file is kept as ``source`` for external scanners.

    Args:
        path: Path relative to ``base_dir`` (or absolute)
        base_dir: Directory relative paths are resolved against

    Returns:
        The loaded Document

    Raises:
        DocumentNotFoundError: If the path does not resolve to a file
    """
    resolved = Path(base_dir) / path
    if not resolved.is_file():
        raise DocumentNotFoundError(path)
    content = resolved.read_text(encoding="utf-8", errors="replace")
    return Document.from_text(path, content, source=str(resolved.absolute()))


def load_documents(paths: Iterable[str], base_dir: Path | str = ".") -> list[Document]:
    """Load documents in order, skipping paths that do not resolve.

    Args:
        paths: Document paths, in audit order
        base_dir: Directory relative paths are resolved against

    Returns:
        Documents that could be read
    """
    documents = []
    for path in paths:
        try:
            documents.append(read_document(path, base_dir))
        except DocumentNotFoundError:
            logger.warning("Skipping missing document: %s", path)
    return documents
