"""In-memory document reading and writing."""

import io
from typing import Iterator, List

from docx import Document
from docx.document import Document as DocxDocument
from docx.table import Table
from loguru import logger
from openpyxl import Workbook, load_workbook

from docrender.config.settings import settings


class DocumentIO:
    """Converts byte buffers to python-docx / openpyxl objects and back."""

    @staticmethod
    def check_size(data: bytes) -> None:
        """Reject buffers above the configured limit.

        Raises:
            ValueError: buffer too large
        """
        limit = settings.document.max_file_size
        if len(data) > limit:
            raise ValueError(f"File too large: {len(data)} bytes (limit {limit})")

    @staticmethod
    def load_document(data: bytes) -> DocxDocument:
        """Open a word-processor package.

        Args:
            data: raw .docx bytes

        Returns:
            the loaded Document

        Raises:
            ValueError: the package could not be read
        """
        DocumentIO.check_size(data)
        try:
            doc = Document(io.BytesIO(data))
            logger.debug(f"Loaded document ({len(data)} bytes)")
            return doc
        except Exception as e:
            logger.error(f"Failed to load document: {e}")
            raise ValueError(f"Failed to load document: {e}") from e

    @staticmethod
    def save_document(doc: DocxDocument) -> bytes:
        """Serialize a Document to bytes.

        Raises:
            ValueError: saving failed
        """
        buffer = io.BytesIO()
        try:
            doc.save(buffer)
            return buffer.getvalue()
        except Exception as e:
            logger.error(f"Failed to save document: {e}")
            raise ValueError(f"Failed to save document: {e}") from e
        finally:
            buffer.close()

    @staticmethod
    def extract_document_text(doc: DocxDocument) -> str:
        """Return every visible piece of text in the document.

        Covers body paragraphs, table cells (nested tables included) and the
        headers and footers of each section.

        Args:
            doc: Document object

        Returns:
            the text joined with newlines
        """
        text: List[str] = [para.text for para in doc.paragraphs]
        for table in doc.tables:
            text.extend(DocumentIO._iter_table_text(table))
        for section in doc.sections:
            for part in (section.header, section.footer):
                if part.is_linked_to_previous:
                    continue
                text.extend(para.text for para in part.paragraphs)
                for table in part.tables:
                    text.extend(DocumentIO._iter_table_text(table))
        return "\n".join(text)

    @staticmethod
    def _iter_table_text(table: Table) -> Iterator[str]:
        for row in table.rows:
            for cell in row.cells:
                for para in cell.paragraphs:
                    yield para.text
                for nested in cell.tables:
                    yield from DocumentIO._iter_table_text(nested)

    @staticmethod
    def load_workbook(data: bytes) -> Workbook:
        """Open a spreadsheet package.

        Raises:
            ValueError: the workbook could not be read
        """
        DocumentIO.check_size(data)
        try:
            workbook = load_workbook(io.BytesIO(data))
            logger.debug(f"Loaded workbook with {len(workbook.worksheets)} sheet(s)")
            return workbook
        except Exception as e:
            logger.error(f"Failed to load workbook: {e}")
            raise ValueError(f"Failed to load workbook: {e}") from e

    @staticmethod
    def save_workbook(workbook: Workbook) -> bytes:
        """Serialize a Workbook to bytes.

        Raises:
            ValueError: saving failed
        """
        buffer = io.BytesIO()
        try:
            workbook.save(buffer)
            return buffer.getvalue()
        except Exception as e:
            logger.error(f"Failed to save workbook: {e}")
            raise ValueError(f"Failed to save workbook: {e}") from e
        finally:
            buffer.close()

    @staticmethod
    def decode_text(data: bytes) -> str:
        """Decode a delimited-text or plain-text container as UTF-8.

        A leading byte-order mark is kept as a character so that re-encoding
        reproduces it.

        Raises:
            ValueError: not valid UTF-8, or too large
        """
        DocumentIO.check_size(data)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"File is not valid UTF-8: {e}") from e
