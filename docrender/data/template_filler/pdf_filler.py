"""Portable-document filler."""

from typing import Mapping

from docrender.data.errors import UnsupportedFormatError
from docrender.data.template_filler.base_filler import TemplateFiller

PDF_FILL_MESSAGE = "This PDF cannot be filled automatically. Use a DOCX or XLSX template instead."


class PdfFiller(TemplateFiller):
    """PDF templates are not fillable."""

    def fill(self, data: bytes, values: Mapping[str, str]) -> bytes:
        raise UnsupportedFormatError(PDF_FILL_MESSAGE)
