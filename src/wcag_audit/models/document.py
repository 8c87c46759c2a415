"""Document model."""

from enum import Enum
from pathlib import PurePath

from pydantic import BaseModel, Field


class DocumentKind(str, Enum):
    """Kind of source document."""

    HTML = "html"
    CSS = "css"
    JS = "js"

    @classmethod
    def from_path(cls, path: str) -> "DocumentKind":
        """Guess the kind from a file suffix, defaulting to HTML."""
        suffix = PurePath(path).suffix.lower()
        if suffix == ".css":
            return cls.CSS
        if suffix in (".js", ".mjs"):
            return cls.JS
        return cls.HTML


class Document(BaseModel):
    """A named, read-only text payload handed to the auditor."""

    model_config = {"frozen": True}

    path: str = Field(description="Configured path, used as the report key")
    content: str = Field(default="", description="Raw document content")
    kind: DocumentKind = Field(default=DocumentKind.HTML, description="Document kind")
    source: str | None = Field(default=None, description="Resolved file the content was read from")

    @property
    def location(self) -> str:
        """Filesystem path external tools should open."""
        return self.source or self.path

    @classmethod
    def from_text(cls, path: str, content: str, source: str | None = None) -> "Document":
        """Create a document, inferring its kind from the path."""
        return cls(path=path, content=content, kind=DocumentKind.from_path(path), source=source)
