"""Portable-document placeholder detector."""

from typing import Set

from docrender.data.placeholder_detector.base_detector import PlaceholderDetector


class PdfDetector(PlaceholderDetector):
    """PDF templates cannot be filled, so they never report placeholders."""

    def detect(self, data: bytes) -> Set[str]:
        return set()
