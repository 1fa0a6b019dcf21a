"""Artifact renderers."""

from docrender.data.renderers.base_renderer import ArtifactRenderer
from docrender.data.renderers.csv_renderer import CsvRenderer
from docrender.data.renderers.docx_renderer import DocxRenderer
from docrender.data.renderers.markdown_renderer import MarkdownRenderer
from docrender.data.renderers.pdf_renderer import PdfRenderer
from docrender.data.renderers.text_renderer import TextRenderer, strip_html
from docrender.data.renderers.xlsx_renderer import XlsxRenderer

__all__ = [
    'ArtifactRenderer',
    'MarkdownRenderer',
    'TextRenderer',
    'CsvRenderer',
    'XlsxRenderer',
    'DocxRenderer',
    'PdfRenderer',
    'strip_html',
]
