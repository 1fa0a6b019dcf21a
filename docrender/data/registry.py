"""Format handler registry.

One row per DocumentFormat; adding a format means adding a row here.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from docrender.data.errors import UnsupportedFormatError
from docrender.data.formats import DocumentFormat
from docrender.data.placeholder_detector import (
    DocxDetector, PdfDetector, PlaceholderDetector, TextDetector, XlsxDetector
)
from docrender.data.renderers import (
    ArtifactRenderer, CsvRenderer, DocxRenderer, MarkdownRenderer, PdfRenderer, TextRenderer, XlsxRenderer
)
from docrender.data.template_filler import DocxFiller, PdfFiller, TemplateFiller, TextFiller, XlsxFiller


@dataclass(frozen=True)
class FormatHandler:
    detector: PlaceholderDetector
    filler: TemplateFiller
    renderer: ArtifactRenderer


FORMAT_HANDLERS: Dict[DocumentFormat, FormatHandler] = {
    DocumentFormat.MARKDOWN: FormatHandler(TextDetector(), TextFiller(), MarkdownRenderer()),
    DocumentFormat.TEXT: FormatHandler(TextDetector(), TextFiller(), TextRenderer()),
    DocumentFormat.CSV: FormatHandler(TextDetector(), TextFiller(), CsvRenderer()),
    DocumentFormat.XLSX: FormatHandler(XlsxDetector(), XlsxFiller(), XlsxRenderer()),
    DocumentFormat.DOCX: FormatHandler(DocxDetector(), DocxFiller(), DocxRenderer()),
    DocumentFormat.PDF: FormatHandler(PdfDetector(), PdfFiller(), PdfRenderer()),
}


def get_handler(fmt: DocumentFormat) -> FormatHandler:
    handler: Optional[FormatHandler] = FORMAT_HANDLERS.get(fmt)
    if handler is None:
        raise UnsupportedFormatError(f"No handler registered for {fmt.value}")
    return handler
