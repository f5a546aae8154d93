"""Data models for segmentation and grammar checking."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class WordSpan:
    """A segmented word with inclusive code-point offsets into the input."""

    word: str
    start_index: int
    end_index: int

    @property
    def length(self) -> int:
        return self.end_index - self.start_index + 1

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }


@dataclass(frozen=True)
class GrammarCheckResult(WordSpan):
    """A word span annotated with its grammar verdict."""

    grammar_correct: bool

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["grammarCorrect"] = self.grammar_correct
        return data


@dataclass(frozen=True)
class WordVerdict:
    """Outcome of validating a single word.

    ``rule`` names the guard or rule that rejected the word and is None
    when the word is valid. Counts stay at zero when a word-level guard
    decides before the character scan runs.
    """

    correct: bool
    rule: Optional[str] = None
    consonant_count: int = 0
    vowel_count: int = 0


@dataclass
class DocumentMetadata:
    """Metadata for a source record."""

    record_id: str
    line_number: int


@dataclass
class LineResult:
    """Result of checking one input record."""

    words: list[GrammarCheckResult]
    metadata: DocumentMetadata
    failed_rules: list[Optional[str]] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for word in self.words if not word.grammar_correct)
