"""Placeholder detector base class."""

from abc import ABC, abstractmethod
from typing import Set


class PlaceholderDetector(ABC):
    """Base class for per-container placeholder detectors."""

    @abstractmethod
    def detect(self, data: bytes) -> Set[str]:
        """Find the placeholder names in a container.

        Args:
            data: raw container bytes

        Returns:
            distinct placeholder names

        Raises:
            ValueError: the container could not be read
        """
        pass
