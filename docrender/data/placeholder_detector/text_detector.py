"""Placeholder detection over plain text."""

import re
from typing import Set

from docrender.data.document_io import DocumentIO
from docrender.data.placeholder_detector.base_detector import PlaceholderDetector

# {{NAME}}: uppercase letter or underscore first, no inner whitespace
PLACEHOLDER_PATTERN: "re.Pattern[str]" = re.compile(r"\{\{([A-Z_][A-Z0-9_]*)\}\}")


def find_placeholders(text: str) -> Set[str]:
    """Return the distinct placeholder names found in ``text``."""
    if not text:
        return set()
    return set(PLACEHOLDER_PATTERN.findall(text))


class TextDetector(PlaceholderDetector):
    """Detector for plain-text, markdown and delimited-text containers.

    The decoded UTF-8 text is the visible text.
    """

    def detect(self, data: bytes) -> Set[str]:
        return find_placeholders(DocumentIO.decode_text(data))

    def detect_text(self, content: str) -> Set[str]:
        return find_placeholders(content)
