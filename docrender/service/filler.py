"""Template filling service."""

from typing import Dict, Mapping, Optional

from loguru import logger

from docrender.data.errors import DocumentError, PlaceholderValidationError, RenderError, UnsupportedFormatError
from docrender.data.formats import DocumentFormat, filled_file_name
from docrender.data.models import PlaceholderMapping, RenderedDocument, Template, TemplateKind
from docrender.data.registry import get_handler
from docrender.data.template_filler import TextFiller


class TemplateFillerService:
    """Fills a template's placeholders with caller data.

    The template is never mutated; every call returns a new
    :class:`RenderedDocument` of the template's own container type.
    """

    def __init__(self):
        self.text_filler = TextFiller()

    @staticmethod
    def build_effective_data(template: Template, data: Optional[Mapping[str, str]]) -> Dict[str, str]:
        """Cached placeholders get their value or ``""``; extra keys pass through."""
        data = data or {}
        effective = {name: data.get(name) or "" for name in sorted(template.placeholders)}
        for key, value in data.items():
            if key not in effective:
                effective[key] = value or ""
        return effective

    @staticmethod
    def validate_mapping(template: Template, data: Optional[Mapping[str, str]]) -> PlaceholderMapping:
        """Compare the template's placeholders with the supplied keys."""
        keys = set(data or {})
        return PlaceholderMapping(
            missing=sorted(template.placeholders - keys),
            extra=sorted(keys - template.placeholders),
        )

    def fill(
        self,
        template: Template,
        data: Optional[Mapping[str, str]],
        require_complete: bool = False,
    ) -> RenderedDocument:
        """Fill ``template`` with ``data``.

        Args:
            template: template with its cached placeholder set
            data: placeholder name to value
            require_complete: reject data leaving a cached placeholder empty

        Returns:
            the filled document

        Raises:
            UnsupportedFormatError: the container cannot be filled (PDF, unknown types)
            PlaceholderValidationError: ``require_complete`` and values are missing
            RenderError: the container could not be processed
        """
        if require_complete:
            missing = [name for name in template.placeholders if not (data or {}).get(name)]
            if missing:
                raise PlaceholderValidationError(missing)

        effective = self.build_effective_data(template, data)

        if template.kind == TemplateKind.TEXT:
            content = self.text_filler.fill_text(template.text_content or "", effective)
            logger.info(f"Filled text template with {len(effective)} value(s)")
            return RenderedDocument(
                data=content.encode("utf-8"),
                mime_type=DocumentFormat.TEXT.mime_type,
                file_name=filled_file_name(None, DocumentFormat.TEXT),
            )

        fmt = template.format
        handler = get_handler(fmt)
        try:
            output = handler.filler.fill(template.file_bytes or b"", effective)
        except UnsupportedFormatError:
            logger.warning(f"Fill refused for {fmt.value} template '{template.file_name}'")
            raise
        except DocumentError:
            raise
        except Exception as e:
            logger.error(f"Failed to fill {fmt.value} template '{template.file_name}': {e}")
            raise RenderError(fmt.value.upper(), str(e)) from e

        rendered = RenderedDocument(
            data=output,
            mime_type=fmt.mime_type,
            file_name=filled_file_name(template.file_name, fmt),
        )
        logger.info(f"Filled {fmt.value} template -> {rendered.file_name} ({rendered.size} bytes)")
        return rendered
