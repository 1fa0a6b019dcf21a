"""Data models."""

import base64
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

from docrender.data.formats import DocumentFormat, classify


class TemplateKind(str, Enum):
    """How a template stores its content."""

    TEXT = "text"
    FILE = "file"


@dataclass(frozen=True)
class Template:
    """A stored template, either inline text or an uploaded file.

    ``placeholders`` is the cached result of extraction; templates are frozen
    so a cached set can only change through :meth:`with_placeholders`.
    """

    kind: TemplateKind
    text_content: Optional[str] = None
    file_bytes: Optional[bytes] = None
    mime_type: Optional[str] = None
    file_name: Optional[str] = None
    placeholders: FrozenSet[str] = frozenset()

    @classmethod
    def from_text(cls, content: str, placeholders: Iterable[str] = ()) -> "Template":
        return cls(kind=TemplateKind.TEXT, text_content=content, placeholders=frozenset(placeholders))

    @classmethod
    def from_file(
        cls,
        file_bytes: bytes,
        mime_type: Optional[str],
        file_name: Optional[str],
        placeholders: Iterable[str] = (),
    ) -> "Template":
        return cls(
            kind=TemplateKind.FILE,
            file_bytes=file_bytes,
            mime_type=mime_type,
            file_name=file_name,
            placeholders=frozenset(placeholders),
        )

    @classmethod
    def from_base64(
        cls,
        file_data: str,
        mime_type: Optional[str],
        file_name: Optional[str],
        placeholders: Iterable[str] = (),
    ) -> "Template":
        """Build a file template from a persistence record holding base64 text."""
        return cls.from_file(base64.b64decode(file_data), mime_type, file_name, placeholders)

    @property
    def format(self) -> DocumentFormat:
        if self.kind == TemplateKind.TEXT:
            return DocumentFormat.TEXT
        return classify(self.mime_type, self.file_name)

    def with_placeholders(self, placeholders: Iterable[str]) -> "Template":
        return replace(self, placeholders=frozenset(placeholders))


@dataclass(frozen=True)
class ArtifactDocument:
    """A generated artifact: a title plus a lightly marked-up body."""

    title: str
    body: str
    generated_at: Optional[datetime] = None


@dataclass(frozen=True)
class RenderedDocument:
    """Output of a fill or render call, ready for the transport layer."""

    data: bytes
    mime_type: str
    file_name: str

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class StructuredTable:
    """Artifact body flattened to ``[index, category, content]`` rows."""

    headers: Tuple[str, str, str]
    rows: List[List[str]] = field(default_factory=list)

    def as_grid(self) -> List[List[str]]:
        """Header row followed by the data rows."""
        return [list(self.headers)] + [list(row) for row in self.rows]


@dataclass(frozen=True)
class PlaceholderMapping:
    """Comparison between a template's placeholders and the supplied data keys."""

    missing: List[str]
    extra: List[str]

    @property
    def complete(self) -> bool:
        return not self.missing
