"""Failure types raised by the templating and rendering layers."""

from typing import Iterable, List


class DocumentError(ValueError):
    """Base class for every failure raised by docrender."""


class ExtractionError(DocumentError):
    """A template container could not be read while scanning for placeholders."""


class UnsupportedFormatError(DocumentError):
    """No handler exists for the requested container or output format."""


class RenderError(DocumentError):
    """A format encoder failed while building a document."""

    def __init__(self, format_name: str, reason: str):
        self.format_name = format_name
        self.reason = reason
        super().__init__(f"Failed to render {format_name}: {reason}")


class PlaceholderValidationError(DocumentError):
    """Fill data leaves required placeholders without a value."""

    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = sorted(missing)
        super().__init__(f"Missing values for placeholders: {', '.join(self.missing)}")
