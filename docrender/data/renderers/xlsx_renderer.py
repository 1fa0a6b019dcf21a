"""Spreadsheet renderer."""

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from docrender.config.settings import settings
from docrender.data.document_io import DocumentIO
from docrender.data.markdown_parser import MarkdownStructureParser
from docrender.data.models import ArtifactDocument
from docrender.data.renderers.base_renderer import ArtifactRenderer


class XlsxRenderer(ArtifactRenderer):
    """One sheet: bold header row, then the structured rows."""

    def __init__(self, parser: MarkdownStructureParser = None):
        self.parser = parser or MarkdownStructureParser()

    def render(self, artifact: ArtifactDocument) -> bytes:
        table = self.parser.parse(artifact.body, artifact.title, artifact.generated_at)

        workbook = Workbook()
        sheet = workbook.active
        sheet.title = settings.render.sheet_title[:31]
        for row in table.as_grid():
            sheet.append(row)

        for cell in sheet[1]:
            cell.font = Font(bold=True)
        for row in sheet.iter_rows(min_row=2, min_col=3, max_col=3):
            for cell in row:
                cell.alignment = Alignment(wrap_text=True, vertical="top")

        widths = (
            settings.render.index_column_width,
            settings.render.category_column_width,
            settings.render.content_column_width,
        )
        for index, width in enumerate(widths, 1):
            sheet.column_dimensions[get_column_letter(index)].width = width

        return DocumentIO.save_workbook(workbook)
