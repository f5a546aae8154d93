"""Utility functions."""

from .text_normalizer import LaoTextNormalizer, remove_zero_width_spaces, sanitize_text

__all__ = [
    "LaoTextNormalizer",
    "remove_zero_width_spaces",
    "sanitize_text",
]
