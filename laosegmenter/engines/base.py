"""Base class for segmentation engines."""

from abc import ABC, abstractmethod

from ..models import WordSpan
from ..utils.text_normalizer import remove_zero_width_spaces


class SegmentationEngine(ABC):
    """Base class for segmentation engines."""

    def preprocess(self, text: str) -> str:
        """Prepare raw text for scanning. Output offsets refer to this text."""
        return remove_zero_width_spaces(text)

    @abstractmethod
    def segment(self, text: str) -> list[WordSpan]:
        """Segment text into words with their indices.

        Args:
            text: Input text to segment

        Returns:
            Ordered, contiguous word spans covering the preprocessed text
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
