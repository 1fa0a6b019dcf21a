"""Placeholder extraction service."""

from typing import Optional, Set

from loguru import logger

from docrender.data.errors import ExtractionError, UnsupportedFormatError
from docrender.data.formats import DocumentFormat, classify
from docrender.data.models import Template, TemplateKind
from docrender.data.placeholder_detector import find_placeholders
from docrender.data.registry import get_handler


class PlaceholderExtractor:
    """Finds the distinct ``{{NAME}}`` placeholders of a template.

    Binary containers that cannot be parsed degrade to an empty set with a
    warning, unless ``strict=True`` is passed, in which case
    :class:`ExtractionError` is raised so that callers can tell an unreadable
    file from one without placeholders.
    """

    def extract_from_text(self, content: str) -> Set[str]:
        return find_placeholders(content)

    def extract_from_file(
        self,
        data: bytes,
        mime_type: Optional[str],
        file_name: Optional[str],
        strict: bool = False,
    ) -> Set[str]:
        """Extract placeholders from a file template.

        Args:
            data: raw file bytes
            mime_type: declared mime type
            file_name: original file name
            strict: raise instead of degrading to an empty set

        Returns:
            placeholder names

        Raises:
            ExtractionError: only with ``strict=True``
        """
        try:
            fmt = classify(mime_type, file_name)
        except UnsupportedFormatError as e:
            if strict:
                raise ExtractionError(str(e)) from e
            logger.warning(f"Skipping placeholder scan: {e}")
            return set()

        try:
            placeholders = get_handler(fmt).detector.detect(data)
        except Exception as e:
            error = ExtractionError(f"Could not read {fmt.value} template '{file_name}': {e}")
            if strict:
                raise error from e
            logger.warning(f"{error}; treating it as having no placeholders")
            return set()

        if fmt == DocumentFormat.PDF:
            logger.info(f"PDF templates are not scanned: {file_name}")
        else:
            logger.info(f"Found {len(placeholders)} placeholder(s) in {file_name}")
        return placeholders

    def extract_from_template(self, template: Template, strict: bool = False) -> Set[str]:
        if template.kind == TemplateKind.TEXT:
            return self.extract_from_text(template.text_content or "")
        return self.extract_from_file(template.file_bytes or b"", template.mime_type, template.file_name, strict=strict)

    def cache_placeholders(self, template: Template, strict: bool = False) -> Template:
        """Return a copy of ``template`` carrying its extracted placeholder set."""
        return template.with_placeholders(self.extract_from_template(template, strict=strict))
