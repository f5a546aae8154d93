"""Segmentation engines."""

from .base import SegmentationEngine
from .syllable_engine import SyllableSegmenter

__all__ = ["SegmentationEngine", "SyllableSegmenter"]
