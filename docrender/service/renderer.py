"""Artifact rendering service."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from loguru import logger

from docrender.data.errors import DocumentError, RenderError, UnsupportedFormatError
from docrender.data.formats import DocumentFormat, build_file_name
from docrender.data.models import ArtifactDocument, RenderedDocument
from docrender.data.registry import get_handler
from docrender.data.renderers import PdfRenderer

FormatLike = Union[DocumentFormat, str]


class MultiFormatRenderer:
    """Turns an artifact body into a downloadable file in any supported format."""

    BUNDLE_FORMATS = (DocumentFormat.PDF,)

    def render(
        self,
        body: str,
        title: str,
        generated_at: Optional[datetime],
        fmt: FormatLike,
    ) -> RenderedDocument:
        """Render one artifact.

        Args:
            body: artifact body
            title: artifact title
            generated_at: generation time; now when omitted
            fmt: target format, as a DocumentFormat or a name/extension

        Returns:
            bytes, mime type and download name

        Raises:
            UnsupportedFormatError: unknown format
            RenderError: the encoder failed
        """
        fmt = self._resolve(fmt)
        artifact = ArtifactDocument(title=title, body=body or "", generated_at=generated_at or self._now())
        return self.render_artifact(artifact, fmt)

    def render_artifact(self, artifact: ArtifactDocument, fmt: FormatLike) -> RenderedDocument:
        fmt = self._resolve(fmt)
        if artifact.generated_at is None:
            artifact = replace(artifact, generated_at=self._now())

        renderer = get_handler(fmt).renderer
        try:
            data = renderer.render(artifact)
        except DocumentError:
            raise
        except Exception as e:
            logger.error(f"Failed to render '{artifact.title}' as {fmt.value}: {e}")
            raise RenderError(fmt.value.upper(), str(e)) from e

        rendered = RenderedDocument(
            data=data,
            mime_type=fmt.mime_type,
            file_name=build_file_name(artifact.title, artifact.generated_at, fmt),
        )
        logger.info(f"Rendered '{artifact.title}' as {fmt.value} ({rendered.size} bytes)")
        return rendered

    def render_bundle(
        self,
        artifacts: Sequence[ArtifactDocument],
        title: str,
        fmt: FormatLike = DocumentFormat.PDF,
        generated_at: Optional[datetime] = None,
    ) -> RenderedDocument:
        """Render several artifacts into one file, summary page first, input order kept.

        All or nothing: a failure on any item discards the whole bundle.

        Raises:
            UnsupportedFormatError: format other than PDF
            RenderError: any item failed to render
        """
        fmt = self._resolve(fmt)
        if fmt not in self.BUNDLE_FORMATS:
            raise UnsupportedFormatError(f"Bundles can only be rendered as PDF, not {fmt.value}")

        generated_at = generated_at or self._now()
        renderer: PdfRenderer = get_handler(fmt).renderer
        try:
            data = renderer.render_bundle(list(artifacts), title, generated_at)
        except Exception as e:
            logger.error(f"Bundle '{title}' aborted after failure: {e}")
            raise RenderError(fmt.value.upper(), str(e)) from e

        rendered = RenderedDocument(
            data=data,
            mime_type=fmt.mime_type,
            file_name=build_file_name(title, generated_at, fmt),
        )
        logger.info(f"Rendered bundle '{title}' with {len(artifacts)} item(s) ({rendered.size} bytes)")
        return rendered

    @staticmethod
    def content_disposition(rendered: RenderedDocument) -> str:
        """``Content-Disposition`` header value for a download."""
        name = rendered.file_name.replace('"', "")
        return f'attachment; filename="{name}"'

    @staticmethod
    def _resolve(fmt: FormatLike) -> DocumentFormat:
        if isinstance(fmt, DocumentFormat):
            return fmt
        return DocumentFormat.parse(fmt)

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)
