"""Template filler base class."""

import re
from abc import ABC, abstractmethod
from typing import Mapping

MARKER_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")


def substitute_placeholders(text: str, values: Mapping[str, str]) -> str:
    """Replace every ``{{KEY}}`` occurrence whose key is in ``values``.

    Each marker is filled once in a single pass; markers appearing inside
    substituted values are not expanded. Markers without a value are left
    untouched.
    """

    def lookup(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        return values[key] or ""

    return MARKER_PATTERN.sub(lookup, text)


class TemplateFiller(ABC):
    """Base class for per-container fillers.

    Fillers never mutate their input; they return a new serialized container.
    """

    @abstractmethod
    def fill(self, data: bytes, values: Mapping[str, str]) -> bytes:
        """Fill a container's placeholders.

        Args:
            data: raw template bytes
            values: effective data, placeholder name to value

        Returns:
            the filled container, same format as the input

        Raises:
            ValueError: the container could not be processed
        """
        pass
