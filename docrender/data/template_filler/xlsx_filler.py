"""Spreadsheet filler."""

from typing import Mapping

from loguru import logger

from docrender.data.document_io import DocumentIO
from docrender.data.template_filler.base_filler import TemplateFiller, substitute_placeholders


class XlsxFiller(TemplateFiller):
    """Substitutes placeholders inside string cells.

    Every sheet is walked over its used range. Only string cells whose value
    actually changes are rewritten; numbers, dates, formulas, styles and the
    sheet layout are left as they are.
    """

    def fill(self, data: bytes, values: Mapping[str, str]) -> bytes:
        workbook = DocumentIO.load_workbook(data)
        try:
            changed = 0
            for sheet in workbook.worksheets:
                for row in sheet.iter_rows():
                    for cell in row:
                        if cell.data_type != "s" or not isinstance(cell.value, str):
                            continue
                        new_value = substitute_placeholders(cell.value, values)
                        if new_value != cell.value:
                            cell.value = new_value
                            # openpyxl reads a leading "=" as a formula
                            cell.data_type = "s"
                            changed += 1
            logger.debug(f"Rewrote {changed} cell(s) across {len(workbook.worksheets)} sheet(s)")
            return DocumentIO.save_workbook(workbook)
        finally:
            workbook.close()
