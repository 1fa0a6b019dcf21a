"""Word-processor filler."""

import io
from typing import Mapping

from docxtpl import DocxTemplate
from loguru import logger

from docrender.data.document_io import DocumentIO
from docrender.data.template_filler.base_filler import TemplateFiller


class DocxFiller(TemplateFiller):
    """Runs a docxtpl templating pass with ``{{``/``}}`` delimiters.

    docxtpl merges tags split across runs before rendering, so a placeholder
    that Word stored in several runs is still replaced. Values are XML-escaped.
    Syntax errors (unbalanced tags) and broken packages surface as ValueError.
    """

    def fill(self, data: bytes, values: Mapping[str, str]) -> bytes:
        DocumentIO.check_size(data)
        source = io.BytesIO(data)
        output = io.BytesIO()
        try:
            template = DocxTemplate(source)
            template.render(dict(values), autoescape=True)
            template.save(output)
            logger.debug(f"Rendered docx template with {len(values)} value(s)")
            return output.getvalue()
        except Exception as e:
            logger.error(f"Docx templating failed: {e}")
            raise ValueError(str(e)) from e
        finally:
            source.close()
            output.close()
