"""Plain-text renderer."""

import html
import re
from typing import List

from docrender.config.settings import settings
from docrender.data.markdown_parser import LineKind, iter_lines
from docrender.data.models import ArtifactDocument
from docrender.data.renderers.base_renderer import ArtifactRenderer

TAG_PATTERN = re.compile(r"</?[A-Za-z][A-Za-z0-9]*(?:\s[^<>]*)?/?>")


def strip_html(content: str) -> str:
    """Drop HTML tags and decode entities left by rich-text editors.

    Content without element tags is returned as is, so comparisons and
    ``<user@host>`` addresses survive.
    """
    if not TAG_PATTERN.search(content):
        return content
    return html.unescape(TAG_PATTERN.sub("", content)).replace("\xa0", " ").strip()


class TextRenderer(ArtifactRenderer):
    """Markup-free text: headings lose their markers, bullets get a glyph."""

    def render(self, artifact: ArtifactDocument) -> bytes:
        lines: List[str] = [artifact.title]
        generated = self.generated_line(artifact)
        if generated:
            lines.append(generated)
        lines.append("")

        for line in iter_lines(strip_html(artifact.body)):
            if line.kind == LineKind.BULLET:
                lines.append(f"{settings.render.bullet_glyph} {line.plain}")
            elif line.kind == LineKind.NUMBERED:
                lines.append(f"{line.level}. {line.plain}")
            elif line.kind in (LineKind.BLANK, LineKind.RULE):
                lines.append("")
            else:
                lines.append(line.plain)
        return "\n".join(lines).encode("utf-8")
