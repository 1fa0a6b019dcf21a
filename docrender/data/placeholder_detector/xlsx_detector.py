"""Spreadsheet placeholder detector."""

from typing import List, Set

from loguru import logger

from docrender.data.document_io import DocumentIO
from docrender.data.placeholder_detector.base_detector import PlaceholderDetector
from docrender.data.placeholder_detector.text_detector import find_placeholders


class XlsxDetector(PlaceholderDetector):
    """Scans every string cell of every sheet.

    Each sheet is walked over its used range; string values are joined into a
    single corpus, so traversal order does not affect the result.
    """

    def detect(self, data: bytes) -> Set[str]:
        workbook = DocumentIO.load_workbook(data)
        corpus: List[str] = []
        try:
            for sheet in workbook.worksheets:
                for row in sheet.iter_rows(values_only=True):
                    corpus.extend(value for value in row if isinstance(value, str))
        finally:
            workbook.close()

        placeholders = find_placeholders("\n".join(corpus))
        logger.debug(f"XlsxDetector scanned {len(corpus)} string cell(s), found {len(placeholders)} placeholder(s)")
        return placeholders
