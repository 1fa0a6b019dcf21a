"""Container formats, classification and file naming."""

import re
from datetime import datetime, timezone
from enum import Enum
from pathlib import PurePath
from typing import Optional
from zoneinfo import ZoneInfo

from docrender.config.settings import settings
from docrender.data.errors import UnsupportedFormatError


class DocumentFormat(str, Enum):
    """Every container the engine reads or writes, keyed by canonical extension."""

    MARKDOWN = "md"
    TEXT = "txt"
    CSV = "csv"
    XLSX = "xlsx"
    DOCX = "docx"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self]

    @classmethod
    def parse(cls, name: str) -> "DocumentFormat":
        """Resolve a format name or extension such as ``"PDF"`` or ``".xlsx"``."""
        key = (name or "").strip().lower().lstrip(".")
        key = ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported format: {name!r}") from None


MIME_TYPES = {
    DocumentFormat.MARKDOWN: "text/markdown",
    DocumentFormat.TEXT: "text/plain",
    DocumentFormat.CSV: "text/csv",
    DocumentFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    DocumentFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    DocumentFormat.PDF: "application/pdf",
}

ALIASES = {
    "markdown": "md",
    "text": "txt",
    "xls": "xlsx",
    "excel": "xlsx",
    "doc": "docx",
    "word": "docx",
}

_SANITIZE_PATTERN = re.compile(r"[^\w\s-]")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def classify(mime_type: Optional[str], file_name: Optional[str]) -> DocumentFormat:
    """Classify a template container from its declared mime type and file name.

    Spreadsheets are checked before word-processor documents because the
    OOXML spreadsheet mime type also contains ``officedocument``.

    Raises:
        UnsupportedFormatError: nothing matched
    """
    mime = (mime_type or "").lower()
    suffix = PurePath(file_name or "").suffix.lower()

    if "spreadsheet" in mime or "excel" in mime or suffix in (".xlsx", ".xls"):
        return DocumentFormat.XLSX
    if "wordprocessingml" in mime or "msword" in mime or suffix in (".docx", ".doc"):
        return DocumentFormat.DOCX
    if mime == "text/csv" or suffix == ".csv":
        return DocumentFormat.CSV
    if mime == "application/pdf" or suffix == ".pdf":
        return DocumentFormat.PDF
    if mime == "text/markdown" or suffix == ".md":
        return DocumentFormat.MARKDOWN
    if mime == "text/plain" or suffix == ".txt":
        return DocumentFormat.TEXT
    raise UnsupportedFormatError(
        f"Unsupported template file: {file_name or '<unnamed>'} ({mime_type or 'unknown mime type'})"
    )


def localize(moment: datetime) -> datetime:
    """Convert to the configured timezone; naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(ZoneInfo(settings.render.timezone))


def format_timestamp(moment: datetime) -> str:
    return localize(moment).strftime(settings.render.timestamp_format)


def sanitize_title(title: str) -> str:
    """Keep letters, digits, spaces, hyphens and underscores; spaces become hyphens."""
    cleaned = _SANITIZE_PATTERN.sub("", title or "").strip()
    cleaned = _WHITESPACE_PATTERN.sub("-", cleaned)
    return cleaned or settings.render.fallback_title


def build_file_name(title: str, generated_at: Optional[datetime], fmt: DocumentFormat) -> str:
    """Download name for a rendered artifact: ``<title>-<timestamp>.<ext>``."""
    stem = sanitize_title(title)
    if generated_at is not None:
        stem = f"{stem}-{localize(generated_at).strftime(settings.render.filename_timestamp_format)}"
    return f"{stem}{fmt.extension}"


def filled_file_name(file_name: Optional[str], fmt: DocumentFormat) -> str:
    """Name of a filled template: the input stem, the filled suffix, the canonical extension."""
    stem = PurePath(file_name).stem if file_name else settings.document.default_template_name
    return f"{stem}{settings.document.filled_suffix}{fmt.extension}"
