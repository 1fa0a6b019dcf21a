"""Markdown renderer."""

from docrender.data.models import ArtifactDocument
from docrender.data.renderers.base_renderer import ArtifactRenderer


class MarkdownRenderer(ArtifactRenderer):
    """Title heading and generated-at line, then the body untouched."""

    def render(self, artifact: ArtifactDocument) -> bytes:
        parts = [f"# {artifact.title}", ""]
        generated = self.generated_line(artifact)
        if generated:
            parts.extend([f"*{generated}*", ""])
        parts.append(artifact.body)
        return "\n".join(parts).encode("utf-8")
