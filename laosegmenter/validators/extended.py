"""Extended grammar rule table: stricter word guards, tone-mark sub-checks
and the cross-character rules 7-10."""

from typing import Optional

from ..charset import MAI_YAMOK, O, SPACE, VOWEL_AM, WO, is_consonant, is_lao
from ..models import WordVerdict
from .base import (
    COUNTABLE_VOWELS,
    LEADING_VOWELS_BASIC,
    GrammarValidator,
    char_at,
)

LEADING_VOWELS_EXTENDED = LEADING_VOWELS_BASIC | {"\u0EC3"}  # ໃ

DOUBLED_LEADING_VOWEL = "\u0EC0\u0EC0"  # ເເ

# A trailing ວ or ອ carries the vowel, so ລວ is not two bare consonants
VOWEL_CARRIERS = frozenset({WO, O})

# Rule 7: vowels that may not sit next to each other
BARE_VOWELS = frozenset({
    "\u0EB0",  # ະ
    "\u0EB2",  # າ
    "\u0EB4",  # ິ
    "\u0EB5",  # ີ
    "\u0EB6",  # ຶ
    "\u0EB7",  # ື
    "\u0EB8",  # ຸ
    "\u0EB9",  # ູ
    "\u0ECD",  # ໍ
    "\u0EBC",  # ຼ
    "\u0EB1",  # ັ
    "\u0EBB",  # ົ
})

# Rule 8: marks that may not be doubled
UNDOUBLED_MARKS = COUNTABLE_VOWELS

# Rule 9: tone marks and the cancellation mark may not stack
STACKING_MARKS = frozenset({
    "\u0EC8",  # ່
    "\u0EC9",  # ້
    "\u0ECB",  # ໋
    "\u0ECC",  # ໌
})

# Rule 10: vowels that must follow a consonant or tone mark directly
SEQUENCE_VOWELS = frozenset({
    "\u0EB2",  # າ
    "\u0EBD",  # ຽ
})

SEQUENCE_BREAKERS = frozenset({
    "\u0EB0", "\u0EB2", "\u0EB4", "\u0EB5", "\u0EB6", "\u0EB7", "\u0EB8",
    "\u0EB9", "\u0ECD", "\u0ECA", "\u0EB1", "\u0EBB", "\u0ECB", "\u0ECC",
    "\u0EBD",
})


class ExtendedGrammarValidator(GrammarValidator):
    """The superseding rule table.

    Adds to the basic table:

    - word guards for a bare ຳ, two bare consonants, doubled characters
      (except ເເ) and three identical characters;
    - ໃ as a leading vowel;
    - position checks for tone marks;
    - rules 7-10, which look at each character together with its neighbours.
    """

    leading_vowels = LEADING_VOWELS_EXTENDED

    def check_word(self, word: str) -> Optional[WordVerdict]:
        if word == SPACE:
            return WordVerdict(True)
        if not word:
            return WordVerdict(False, "empty")
        # Checked before the single-character guard so a bare ຳ keeps its own rule name
        if word == VOWEL_AM:
            return WordVerdict(False, "bare_am")
        if len(word) == 1:
            if word == MAI_YAMOK:
                return WordVerdict(True)
            return WordVerdict(False, "single_char")
        if not is_lao(word[0]):
            return WordVerdict(True)

        if len(word) == 2:
            first, second = word
            if (
                is_consonant(first)
                and is_consonant(second)
                and second not in VOWEL_CARRIERS
            ):
                return WordVerdict(False, "bare_consonants")
            if first == second and word != DOUBLED_LEADING_VOWEL:
                return WordVerdict(False, "doubled_chars")

        if len(word) == 3 and word[0] == word[1] == word[2]:
            return WordVerdict(False, "tripled_chars")

        return None

    def check_char(self, word: str, index: int) -> Optional[str]:
        rule = super().check_char(word, index)
        if rule is not None:
            return rule
        return self.check_neighbours(word, index)

    def check_tone_mark(self, word: str, index: int) -> Optional[str]:
        length = len(word)
        nxt = char_at(word, index + 1)

        if length <= 2 and nxt is None:
            return "tone_mark"
        if index == 1 and length < 3:
            return "tone_mark"
        # A leading vowel followed by two consonants leaves no syllable to carry the tone
        if (
            word[0] in self.leading_vowels
            and is_consonant(char_at(word, 1))
            and is_consonant(char_at(word, 2))
        ):
            return "tone_mark"
        # No consonant-tone-consonant check for three-character words: ທ້ດ is valid
        return None

    def check_neighbours(self, word: str, index: int) -> Optional[str]:
        """Rules 7-10, applied to every character regardless of its class."""
        char = word[index]
        prev = char_at(word, index - 1)
        nxt = char_at(word, index + 1)
        nxt2 = char_at(word, index + 2)

        if char in BARE_VOWELS and nxt in BARE_VOWELS:
            return "adjacent_vowels"

        # ເ is not in UNDOUBLED_MARKS, so the ເເ exemption never applies
        if (
            nxt == char
            and char in UNDOUBLED_MARKS
            and char + nxt != DOUBLED_LEADING_VOWEL
        ):
            return "doubled_mark"

        if char in STACKING_MARKS and nxt in STACKING_MARKS:
            return "stacked_tones"

        if char in SEQUENCE_VOWELS:
            if prev in SEQUENCE_BREAKERS:
                return "vowel_sequence"
            if is_consonant(nxt) and is_consonant(nxt2):
                return "vowel_sequence"

        return None
