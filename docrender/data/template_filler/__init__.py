"""Template fillers."""

from docrender.data.template_filler.base_filler import TemplateFiller, substitute_placeholders
from docrender.data.template_filler.docx_filler import DocxFiller
from docrender.data.template_filler.pdf_filler import PDF_FILL_MESSAGE, PdfFiller
from docrender.data.template_filler.text_filler import TextFiller
from docrender.data.template_filler.xlsx_filler import XlsxFiller

__all__ = [
    'TemplateFiller',
    'TextFiller',
    'DocxFiller',
    'XlsxFiller',
    'PdfFiller',
    'PDF_FILL_MESSAGE',
    'substitute_placeholders',
]
