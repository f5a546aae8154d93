"""Rule-based Lao word segmentation driven by syllable structure."""

from typing import Optional

from ..charset import (
    HO_SUNG,
    MAI_KANG,
    MAI_YAMOK,
    O,
    SPACE,
    VOWEL_E,
    WO,
    is_consonant,
    is_digraph_follower,
    is_lao,
    is_leading_vowel,
    is_middle_char,
)
from ..models import WordSpan
from .base import SegmentationEngine

# Consonant + ວ clusters read as a single onset (ຄວາມ, ຂວາ, ກວ່າ)
WO_CLUSTERS = frozenset({"ກວ", "ຂວ", "ຄວ"})

# Consonant + ຣ clusters found in loanwords (ທຣັມ, ປຣິນ, ກຣາມ)
RO_CLUSTERS = frozenset({"ທຣ", "ປຣ", "ກຣ", "ບຣ", "ຟຣ"})

# ວ and ອ between two consonants act as a vowel carrier (ສວຍ, ຂອງ)
INFIX_CARRIERS = frozenset({WO, O})


class _ScanState:
    """Mutable scanner state: the word being built and the spans emitted so far.

    The buffer always holds the characters at positions
    ``start .. start + len(buffer) - 1`` of the scanned text.
    """

    __slots__ = ("buffer", "start", "spans")

    def __init__(self) -> None:
        self.buffer: list[str] = []
        self.start = 0
        self.spans: list[WordSpan] = []

    def last(self, offset: int = 1) -> Optional[str]:
        if len(self.buffer) < offset:
            return None
        return self.buffer[-offset]

    def append(self, char: str, index: int) -> None:
        if not self.buffer:
            self.start = index
        self.buffer.append(char)

    def flush(self, end_index: int) -> None:
        if self.buffer:
            self.spans.append(WordSpan("".join(self.buffer), self.start, end_index))
        self.buffer = []

    def emit_single(self, char: str, index: int) -> None:
        """Flush the buffer, then emit ``char`` as a word of its own."""
        self.flush(index - 1)
        self.spans.append(WordSpan(char, index, index))

    def restart(self, char: str, index: int) -> None:
        """Flush the buffer and open a new word with ``char``."""
        self.flush(index - 1)
        self.append(char, index)

    def split_tail(self, keep: int, char: str, index: int) -> None:
        """Close the word before its last ``keep`` characters.

        The kept characters plus ``char`` become the new buffer.
        """
        head = self.buffer[:-keep]
        tail = self.buffer[-keep:]
        if head:
            self.spans.append(WordSpan("".join(head), self.start, index - keep - 1))
        self.buffer = tail + [char]
        self.start = index - keep


class SyllableSegmenter(SegmentationEngine):
    """Single-pass Lao word segmenter.

    Scans left to right with a lookback of two buffered characters and a
    lookahead of one raw character, so segmentation is linear in the input
    length. Every input character ends up in exactly one span: spaces and
    ໆ are always words of their own, and runs of non-Lao characters are
    kept whole.
    """

    def segment(self, text: str) -> list[WordSpan]:
        """Segment text into Lao words.

        Args:
            text: Input text to segment

        Returns:
            Ordered word spans; indices are inclusive and refer to the text
            after zero-width-space removal

        Examples:
            >>> [s.word for s in SyllableSegmenter().segment("ປະເທດລາວ")]
            ['ປະ', 'ເທດ', 'ລາວ']
        """
        if not text:
            return []

        text = self.preprocess(text)
        state = _ScanState()
        last_index = len(text) - 1

        for index, char in enumerate(text):
            next_char = text[index + 1] if index < last_index else None
            self._step(state, char, index, next_char)

        state.flush(last_index)
        return [span for span in state.spans if span.word]

    def _step(
        self, state: _ScanState, char: str, index: int, next_char: Optional[str]
    ) -> None:
        last = state.last()

        if char == SPACE:
            state.emit_single(SPACE, index)
            return

        if not is_lao(char):
            # Contiguous non-Lao characters (digits, Latin, punctuation) stay together
            if is_lao(last):
                state.restart(char, index)
            else:
                state.append(char, index)
            return

        if char == MAI_YAMOK:
            state.emit_single(MAI_YAMOK, index)
            return

        if is_leading_vowel(char):
            # ເເ is a doubled leading vowel, not two words
            if char == VOWEL_E and last == VOWEL_E:
                state.append(char, index)
            else:
                state.restart(char, index)
            return

        if last is not None and not is_lao(last):
            state.restart(char, index)
            return

        if is_middle_char(char):
            self._handle_middle_char(state, char, index)
            return

        if (
            char in INFIX_CARRIERS
            and is_consonant(last)
            and is_lao(next_char)
            and is_consonant(next_char)
        ):
            state.split_tail(1, char, index)
            return

        state.append(char, index)

    def _handle_middle_char(self, state: _ScanState, char: str, index: int) -> None:
        """Attach a vowel, tone mark or diacritic to the right consonant."""
        if not state.buffer:
            state.append(char, index)
            return

        last = state.last()
        second_last = state.last(2)

        if is_middle_char(last) or (char == MAI_KANG and is_leading_vowel(second_last)):
            state.append(char, index)
        elif second_last is not None and self._is_cluster(second_last, last):
            state.split_tail(2, char, index)
        elif is_consonant(last) and not is_leading_vowel(second_last):
            state.split_tail(1, char, index)
        else:
            state.append(char, index)

    @staticmethod
    def _is_cluster(first: str, second: str) -> bool:
        pair = first + second
        if pair in WO_CLUSTERS or pair in RO_CLUSTERS:
            return True
        return first == HO_SUNG and is_digraph_follower(second)
