"""Word-processor renderer."""

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

from docrender.data.document_io import DocumentIO
from docrender.data.markdown_parser import LineKind, iter_lines
from docrender.data.models import ArtifactDocument
from docrender.data.renderers.base_renderer import ArtifactRenderer

MAX_HEADING_LEVEL = 3


class DocxRenderer(ArtifactRenderer):
    """Builds the document paragraph by paragraph.

    Title as a Title heading, generated-at as an italic centered line, then
    each body line mapped to a heading, a ``List Bullet``/``List Number``
    item or a plain paragraph. All numbered items share the single numbering
    definition of the ``List Number`` style.
    """

    def render(self, artifact: ArtifactDocument) -> bytes:
        doc = Document()
        doc.core_properties.title = artifact.title

        doc.add_heading(artifact.title, level=0)
        generated = self.generated_line(artifact)
        if generated:
            meta = doc.add_paragraph()
            meta.add_run(generated).italic = True
            meta.alignment = WD_ALIGN_PARAGRAPH.CENTER
        doc.add_paragraph()

        for line in iter_lines(artifact.body):
            if line.kind == LineKind.HEADING:
                doc.add_heading(line.plain, level=min(line.level, MAX_HEADING_LEVEL))
            elif line.kind == LineKind.BULLET:
                doc.add_paragraph(line.plain, style="List Bullet")
            elif line.kind == LineKind.NUMBERED:
                doc.add_paragraph(line.plain, style="List Number")
            elif line.kind in (LineKind.TEXT, LineKind.METADATA):
                doc.add_paragraph(line.plain)

        return DocumentIO.save_document(doc)
