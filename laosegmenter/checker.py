"""Segment Lao text and judge each word against a grammar rule table."""

from typing import Optional

from .engines import SegmentationEngine, SyllableSegmenter
from .models import GrammarCheckResult, WordSpan, WordVerdict
from .validators import ExtendedGrammarValidator, GrammarValidator, get_validator

_SEGMENTER = SyllableSegmenter()
_VALIDATOR = ExtendedGrammarValidator()


def segment(text: str) -> list[WordSpan]:
    """Split text into ordered word spans.

    Args:
        text: Raw input text; zero-width spaces are removed first

    Returns:
        Contiguous spans covering the whole (stripped) input
    """
    return _SEGMENTER.segment(text)


def validate(word: str) -> bool:
    """Judge a single word with the extended rule table."""
    return _VALIDATOR.validate(word)


def check(text: str) -> list[GrammarCheckResult]:
    """Segment text and annotate every word with its grammar verdict.

    Examples:
        >>> [(r.word, r.grammar_correct) for r in check("ສະບາຍດີ")]
        [('ສະ', True), ('ບາຍ', True), ('ດີ', True)]
    """
    return [
        GrammarCheckResult(
            span.word, span.start_index, span.end_index, _VALIDATOR.validate(span.word)
        )
        for span in segment(text)
    ]


class LaoGrammarChecker:
    """Segmenter and validator bundled for repeated use."""

    def __init__(
        self,
        rule_set: str = "extended",
        segmenter: Optional[SegmentationEngine] = None,
    ):
        """Initialize the checker.

        Args:
            rule_set: Name of a registered validator ("basic" or "extended")
            segmenter: Segmentation engine to use (default: SyllableSegmenter)

        Raises:
            ValueError: If the rule set is unknown
        """
        self.rule_set = rule_set
        self.validator: GrammarValidator = get_validator(rule_set)
        self.segmenter = segmenter or SyllableSegmenter()

    def segment(self, text: str) -> list[WordSpan]:
        return self.segmenter.segment(text)

    def check(self, text: str) -> list[GrammarCheckResult]:
        return [result for result, _ in self.diagnose(text)]

    def diagnose(self, text: str) -> list[tuple[GrammarCheckResult, WordVerdict]]:
        """Check text and keep the per-word verdict details.

        Returns:
            (result, verdict) pairs in text order
        """
        pairs = []
        for span in self.segment(text):
            verdict = self.validator.diagnose(span.word)
            result = GrammarCheckResult(
                span.word, span.start_index, span.end_index, verdict.correct
            )
            pairs.append((result, verdict))
        return pairs

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(rule_set={self.rule_set!r}, "
            f"segmenter={self.segmenter!r})"
        )
