"""Placeholder detectors."""

from docrender.data.placeholder_detector.base_detector import PlaceholderDetector
from docrender.data.placeholder_detector.docx_detector import DocxDetector
from docrender.data.placeholder_detector.pdf_detector import PdfDetector
from docrender.data.placeholder_detector.text_detector import (
    PLACEHOLDER_PATTERN,
    TextDetector,
    find_placeholders,
)
from docrender.data.placeholder_detector.xlsx_detector import XlsxDetector

__all__ = [
    'PlaceholderDetector',
    'TextDetector',
    'DocxDetector',
    'XlsxDetector',
    'PdfDetector',
    'PLACEHOLDER_PATTERN',
    'find_placeholders',
]
