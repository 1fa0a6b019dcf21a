"""Renderer base class."""

from abc import ABC, abstractmethod

from docrender.config.settings import settings
from docrender.data.formats import format_timestamp
from docrender.data.models import ArtifactDocument


class ArtifactRenderer(ABC):
    """Base class for per-format artifact renderers."""

    @abstractmethod
    def render(self, artifact: ArtifactDocument) -> bytes:
        """Encode an artifact.

        Args:
            artifact: the artifact; ``generated_at`` is always set by the caller

        Returns:
            the encoded file

        Raises:
            Exception: whatever the underlying encoder raises
        """
        pass

    @staticmethod
    def generated_line(artifact: ArtifactDocument) -> str:
        """``Gerado em: <timestamp>``, or an empty string without a timestamp."""
        if artifact.generated_at is None:
            return ""
        return f"{settings.render.generated_label}: {format_timestamp(artifact.generated_at)}"
