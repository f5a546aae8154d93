"""Text normalization utilities for Lao text."""

import re

from ..charset import ZERO_WIDTH_SPACE


class LaoTextNormalizer:
    """Clean Lao text before segmentation and before writing it out."""

    # Control characters except tab, newline and carriage return
    ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

    @classmethod
    def remove_zero_width_spaces(cls, text: str) -> str:
        """
        Remove zero-width spaces (U+200B).

        Lao is written without spaces between words and editors often insert
        U+200B as an invisible break hint. Offsets reported by the segmenter
        refer to the text after this removal.

        Args:
            text: Input text

        Returns:
            Text without zero-width spaces
        """
        if not text:
            return text
        return text.replace(ZERO_WIDTH_SPACE, "")

    @classmethod
    def strip_control_characters(cls, text: str) -> str:
        """
        Remove control characters that may interfere with CSV/Excel.

        Args:
            text: Input text

        Returns:
            Sanitized text
        """
        if not text:
            return text
        return cls.ILLEGAL_CHARS.sub("", text)


def remove_zero_width_spaces(text: str) -> str:
    """Convenience wrapper around LaoTextNormalizer.remove_zero_width_spaces."""
    return LaoTextNormalizer.remove_zero_width_spaces(text)


def sanitize_text(text: str) -> str:
    """Convenience wrapper around LaoTextNormalizer.strip_control_characters."""
    return LaoTextNormalizer.strip_control_characters(text)
