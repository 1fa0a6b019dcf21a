"""Portable-document renderer."""

import io
from datetime import datetime
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape

from loguru import logger
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    Flowable, HRFlowable, PageBreak, Paragraph, SimpleDocTemplate, Spacer
)

from docrender.config.settings import settings
from docrender.data.formats import format_timestamp
from docrender.data.markdown_parser import LineKind, iter_lines
from docrender.data.models import ArtifactDocument
from docrender.data.renderers.base_renderer import ArtifactRenderer


class PdfRenderer(ArtifactRenderer):
    """Title page header followed by the body as plain lines.

    Headings and list markers are flattened: headings become plain lines set
    apart by spacing, bullets get a glyph, numbered items keep their number.
    """

    def __init__(self):
        self.styles = self._build_styles()

    def _build_styles(self):
        cfg = settings.render
        styles = getSampleStyleSheet()
        styles.add(ParagraphStyle(
            name='ArtifactTitle',
            parent=styles['Title'],
            fontName='Helvetica-Bold',
            fontSize=cfg.pdf_title_size,
            leading=cfg.pdf_title_size * 1.2,
            alignment=TA_CENTER,
            spaceAfter=6,
        ))
        styles.add(ParagraphStyle(
            name='ArtifactMeta',
            parent=styles['Normal'],
            fontName='Helvetica',
            fontSize=cfg.pdf_meta_size,
            textColor=colors.HexColor(cfg.pdf_meta_color),
            alignment=TA_CENTER,
            spaceAfter=18,
        ))
        styles.add(ParagraphStyle(
            name='ArtifactBody',
            parent=styles['Normal'],
            fontName='Helvetica',
            fontSize=cfg.pdf_body_size,
            leading=cfg.pdf_body_size + 4,
            textColor=colors.black,
            alignment=TA_LEFT,
        ))
        return styles

    def render(self, artifact: ArtifactDocument) -> bytes:
        story = self._header(artifact.title, artifact.generated_at)
        story.extend(self._body(artifact.body))
        return self._build(story, artifact.title)

    def render_bundle(
        self,
        artifacts: Sequence[ArtifactDocument],
        title: str,
        generated_at: Optional[datetime] = None,
    ) -> bytes:
        """Render a summary page followed by one page per artifact, in order.

        The whole bundle goes into one output stream; any failure aborts it.
        """
        story = self._header(title, generated_at)
        story.append(Paragraph(
            escape(f"{settings.render.bundle_items_label}: {len(artifacts)}"),
            self.styles['ArtifactBody'],
        ))
        story.append(Spacer(1, 6))
        for index, artifact in enumerate(artifacts, 1):
            story.append(Paragraph(escape(f"{index}. {artifact.title}"), self.styles['ArtifactBody']))

        for artifact in artifacts:
            story.append(PageBreak())
            story.extend(self._header(artifact.title, artifact.generated_at))
            story.extend(self._body(artifact.body))

        logger.debug(f"Bundle story ready: {len(artifacts)} item(s), {len(story)} flowable(s)")
        return self._build(story, title)

    def _header(self, title: str, generated_at: Optional[datetime]) -> List[Flowable]:
        flowables: List[Flowable] = [Paragraph(escape(title), self.styles['ArtifactTitle'])]
        if generated_at is not None:
            meta = f"{settings.render.generated_label}: {format_timestamp(generated_at)}"
            flowables.append(Paragraph(escape(meta), self.styles['ArtifactMeta']))
        return flowables

    def _body(self, body: str) -> List[Flowable]:
        style = self.styles['ArtifactBody']
        flowables: List[Flowable] = []
        for line in iter_lines(body):
            if line.kind == LineKind.BLANK:
                flowables.append(Spacer(1, style.leading / 2))
            elif line.kind == LineKind.RULE:
                flowables.append(HRFlowable(width="100%", thickness=0.5, color=colors.grey,
                                            spaceBefore=4, spaceAfter=4))
            elif line.kind == LineKind.HEADING:
                flowables.append(Spacer(1, style.leading / 2))
                flowables.append(Paragraph(escape(line.plain), style))
                flowables.append(Spacer(1, style.leading / 2))
            elif line.kind == LineKind.BULLET:
                flowables.append(Paragraph(escape(f"{settings.render.bullet_glyph} {line.plain}"), style))
            elif line.kind == LineKind.NUMBERED:
                flowables.append(Paragraph(escape(f"{line.level}. {line.plain}"), style))
            else:
                flowables.append(Paragraph(escape(line.plain), style))
        return flowables

    def _build(self, story: List[Flowable], title: str) -> bytes:
        margin = settings.render.pdf_margin_mm * mm
        buffer = io.BytesIO()
        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                leftMargin=margin,
                rightMargin=margin,
                topMargin=margin,
                bottomMargin=margin,
                title=title,
            )
            doc.build(story)
            return buffer.getvalue()
        finally:
            buffer.close()
