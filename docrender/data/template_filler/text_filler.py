"""Plain-text and delimited-text fillers."""

from typing import Mapping

from docrender.data.document_io import DocumentIO
from docrender.data.template_filler.base_filler import TemplateFiller, substitute_placeholders


class TextFiller(TemplateFiller):
    """Global substitution over the decoded UTF-8 text.

    Used for inline text templates as well as .txt, .md and .csv files.
    """

    def fill(self, data: bytes, values: Mapping[str, str]) -> bytes:
        content = DocumentIO.decode_text(data)
        return self.fill_text(content, values).encode("utf-8")

    def fill_text(self, content: str, values: Mapping[str, str]) -> str:
        return substitute_placeholders(content, values)
