"""Word-processor placeholder detector."""

from typing import Set

from loguru import logger

from docrender.data.document_io import DocumentIO
from docrender.data.placeholder_detector.base_detector import PlaceholderDetector
from docrender.data.placeholder_detector.text_detector import find_placeholders


class DocxDetector(PlaceholderDetector):
    """Opens the package and scans its full extractable text.

    Placeholders split across runs are still found because paragraph text
    joins the runs back together.
    """

    def detect(self, data: bytes) -> Set[str]:
        doc = DocumentIO.load_document(data)
        text = DocumentIO.extract_document_text(doc)
        placeholders = find_placeholders(text)
        logger.debug(f"DocxDetector found {len(placeholders)} placeholder(s) in {len(text)} characters")
        return placeholders
