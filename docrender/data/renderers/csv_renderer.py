"""Delimited-text renderer."""

import csv
import io

from docrender.data.markdown_parser import MarkdownStructureParser
from docrender.data.models import ArtifactDocument
from docrender.data.renderers.base_renderer import ArtifactRenderer

UTF8_BOM = "\ufeff"


class CsvRenderer(ArtifactRenderer):
    """Header row plus one row per structured row, every field quoted.

    The byte-order mark lets spreadsheet applications detect UTF-8.
    """

    def __init__(self, parser: MarkdownStructureParser = None):
        self.parser = parser or MarkdownStructureParser()

    def render(self, artifact: ArtifactDocument) -> bytes:
        table = self.parser.parse(artifact.body, artifact.title, artifact.generated_at)
        buffer = io.StringIO()
        try:
            writer = csv.writer(buffer, quoting=csv.QUOTE_ALL)
            writer.writerows(table.as_grid())
            return (UTF8_BOM + buffer.getvalue()).encode("utf-8")
        finally:
            buffer.close()
